"""
Business logic services for identity service
"""

from .auth_service import AuthService

__all__ = ["AuthService"]
