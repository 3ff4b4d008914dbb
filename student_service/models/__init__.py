"""
Data models for student service
"""

from .student import Student, StudentPayload

__all__ = ["Student", "StudentPayload"]
