"""
Course Service
Course creation, ownership checks and enrollment
"""

from typing import Any, List, Optional

import structlog

from campus_shared.utils.errors import Conflict, NotFound, ValidationError
from campus_shared.utils.storage import RecordStore, parse_record_id
from course_service.models.course import Course

logger = structlog.get_logger(__name__)


def parse_student_id(raw: Any) -> int:
    """
    Validate the studentId of an enrollment request

    Raises:
        ValidationError: missing or not an integer
    """
    if not raw:
        raise ValidationError("Student ID is required")
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValidationError("Student ID must be a valid number")
    student_id = parse_record_id(raw.strip() if isinstance(raw, str) else raw)
    if student_id is None:
        raise ValidationError("Student ID must be a valid number")
    return student_id


class CourseService:
    """Course operations over a record store"""

    def __init__(self, courses: RecordStore[Course]):
        self.courses = courses

    async def create_course(self, name: Optional[str], user_id: int) -> Course:
        if not name:
            raise ValidationError("Course name is required")

        course = await self.courses.insert(Course(name=name, created_by=user_id))
        logger.info("Course created", course_id=course.id, user_id=user_id)
        return course

    async def list_courses(self) -> List[Course]:
        return await self.courses.list_all()

    async def get_course(self, course_id: str) -> Course:
        record_id = parse_record_id(course_id)
        course = await self.courses.find_by_id(record_id) if record_id is not None else None
        if course is None:
            raise NotFound("Course not found", error="Course not found")
        return course

    async def enroll(self, course_id: str, raw_student_id: Any) -> Course:
        """
        Enroll a student in a course

        A student appears at most once in a course's enrollment list.

        Raises:
            ValidationError: studentId missing or not a number
            NotFound: course does not exist
            Conflict: student already enrolled
        """
        student_id = parse_student_id(raw_student_id)
        course = await self.get_course(course_id)

        if student_id in course.students_enrolled:
            raise Conflict(
                "Student already enrolled in this course",
                error="Student already enrolled in this course"
            )

        updated = await self.courses.update(
            course.id, students_enrolled=[*course.students_enrolled, student_id]
        )
        logger.info("Student enrolled", course_id=course.id, student_id=student_id)
        return updated

    async def delete_course(self, course_id: str, user_id: int) -> int:
        """Delete a course created by user_id; anything else is NotFound"""
        record_id = parse_record_id(course_id)
        course = await self.courses.find_by_id(record_id) if record_id is not None else None
        if course is None or course.created_by != user_id:
            raise NotFound(
                "Course not found or not owned by this user",
                error="Course not found"
            )

        await self.courses.delete(course.id)
        logger.info("Course deleted", course_id=course.id, user_id=user_id)
        return course.id
