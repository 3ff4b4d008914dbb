"""
API routes for course service
"""

from . import courses, health

__all__ = ["courses", "health"]
