"""
Identity service: account creation and login
"""
