"""
API gateway: authenticates callers and forwards each request to exactly
one backend service
"""
