"""
API routes for student service
"""

from . import health, students

__all__ = ["health", "students"]
