"""
API routes for identity service
"""

from . import auth, health

__all__ = ["auth", "health"]
