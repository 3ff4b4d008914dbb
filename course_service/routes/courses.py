"""
Course management routes
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status
import structlog

from campus_shared.utils.credentials import VerifiedIdentity, get_current_identity
from course_service.models.course import CoursePayload, EnrollmentPayload
from course_service.services.course_service import CourseService

logger = structlog.get_logger(__name__)

router = APIRouter(dependencies=[Depends(get_current_identity)])


def get_course_service(request: Request) -> CourseService:
    """Dependency to get the course service instance"""
    return request.app.state.course_service


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_course(
    payload: CoursePayload,
    service: CourseService = Depends(get_course_service),
    identity: VerifiedIdentity = Depends(get_current_identity)
):
    """Create a course owned by the caller"""
    course = await service.create_course(payload.name, identity.user_id)
    return {
        "message": "Course created successfully",
        "course": course.to_wire()
    }


@router.get("")
async def list_courses(
    service: CourseService = Depends(get_course_service)
) -> List[dict]:
    """List every course"""
    return [course.to_wire() for course in await service.list_courses()]


@router.post("/{course_id}/enroll")
async def enroll_student(
    course_id: str,
    payload: EnrollmentPayload,
    service: CourseService = Depends(get_course_service)
):
    """Enroll a student in a course"""
    course = await service.enroll(course_id, payload.student_id)
    return {
        "message": "Student enrolled successfully",
        "course": course.to_wire()
    }


@router.get("/{course_id}/students")
async def list_course_students(
    course_id: str,
    service: CourseService = Depends(get_course_service)
):
    """List the students enrolled in a course"""
    course = await service.get_course(course_id)
    return {
        "courseId": course.id,
        "name": course.name,
        "studentsEnrolled": course.students_enrolled
    }


@router.delete("/{course_id}")
async def delete_course(
    course_id: str,
    service: CourseService = Depends(get_course_service),
    identity: VerifiedIdentity = Depends(get_current_identity)
):
    """Delete a course the caller created"""
    deleted_id = await service.delete_course(course_id, identity.user_id)
    return {"message": f"Course with id {deleted_id} deleted successfully."}
