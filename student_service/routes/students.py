"""
Student management routes

Every route re-verifies the caller's bearer token; records are only
visible to and changeable by the user who created them.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status
import structlog

from campus_shared.utils.credentials import VerifiedIdentity, get_current_identity
from campus_shared.utils.errors import NotFound, ValidationError
from campus_shared.utils.storage import RecordStore, parse_record_id
from student_service.models.student import Student, StudentPayload, utcnow

logger = structlog.get_logger(__name__)

router = APIRouter()

NOT_OWNED = "Student not found or not owned by this user"


def get_store(request: Request) -> RecordStore[Student]:
    """Dependency to get the student store"""
    return request.app.state.students


async def get_owned_student(
    student_id: str,
    store: RecordStore[Student],
    identity: VerifiedIdentity,
) -> Student:
    """Look up a student the caller owns, or raise NotFound"""
    record_id = parse_record_id(student_id)
    student = await store.find_by_id(record_id) if record_id is not None else None
    if student is None or student.user_id != identity.user_id:
        raise NotFound(NOT_OWNED, error="Student not found")
    return student


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: StudentPayload,
    store: RecordStore[Student] = Depends(get_store),
    identity: VerifiedIdentity = Depends(get_current_identity)
):
    """Create a student profile owned by the caller"""
    if not payload.name:
        raise ValidationError("Student name is required")

    student = await store.insert(Student(name=payload.name, user_id=identity.user_id))
    logger.info("Student created", student_id=student.id, user_id=identity.user_id)
    return {
        "message": "Student profile successfully created.",
        "student": student.to_wire()
    }


@router.get("")
async def list_students(
    store: RecordStore[Student] = Depends(get_store),
    identity: VerifiedIdentity = Depends(get_current_identity)
) -> List[dict]:
    """List the caller's students"""
    students = await store.find_by_owner(identity.user_id)
    return [student.to_wire() for student in students]


@router.put("/{student_id}")
async def replace_student(
    student_id: str,
    payload: StudentPayload,
    store: RecordStore[Student] = Depends(get_store),
    identity: VerifiedIdentity = Depends(get_current_identity)
):
    """Replace a student's name"""
    if not payload.name:
        raise ValidationError("Student name is required")

    student = await get_owned_student(student_id, store, identity)
    updated = await store.update(student.id, name=payload.name, updated_at=utcnow())
    logger.info("Student updated", student_id=student.id, user_id=identity.user_id)
    return {
        "message": "Student updated successfully",
        "student": updated.to_wire()
    }


@router.patch("/{student_id}")
async def patch_student(
    student_id: str,
    payload: Optional[StudentPayload] = None,
    store: RecordStore[Student] = Depends(get_store),
    identity: VerifiedIdentity = Depends(get_current_identity)
):
    """Partially update a student"""
    student = await get_owned_student(student_id, store, identity)

    changes = {"updated_at": utcnow()}
    if payload is not None and payload.name is not None:
        changes["name"] = payload.name

    updated = await store.update(student.id, **changes)
    logger.info("Student partially updated", student_id=student.id, user_id=identity.user_id)
    return {
        "message": "Student partially updated successfully",
        "student": updated.to_wire()
    }


@router.delete("/{student_id}")
async def delete_student(
    student_id: str,
    store: RecordStore[Student] = Depends(get_store),
    identity: VerifiedIdentity = Depends(get_current_identity)
):
    """Delete one of the caller's students"""
    student = await get_owned_student(student_id, store, identity)
    await store.delete(student.id)
    logger.info("Student deleted", student_id=student.id, user_id=identity.user_id)
    return {"message": f"Student with id {student.id} deleted successfully."}
