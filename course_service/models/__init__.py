"""
Data models for course service
"""

from .course import Course, CoursePayload, EnrollmentPayload

__all__ = ["Course", "CoursePayload", "EnrollmentPayload"]
