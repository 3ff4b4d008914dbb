"""
Course service: courses and enrollment
"""
