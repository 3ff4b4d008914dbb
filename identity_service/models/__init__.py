"""
Data models for identity service
"""

from .user import User, UserCredentials, UserPublic

__all__ = ["User", "UserCredentials", "UserPublic"]
