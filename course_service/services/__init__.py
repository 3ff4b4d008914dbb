"""
Business logic services for course service
"""

from .course_service import CourseService

__all__ = ["CourseService"]
