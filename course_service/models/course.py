"""
Course data models and schemas
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class CoursePayload(BaseModel):
    """Body of a create course request"""
    name: Optional[str] = None


class EnrollmentPayload(BaseModel):
    """Body of an enrollment request; studentId is validated by the service"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    student_id: Any = None


class Course(BaseModel):
    """Stored course record"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = None
    name: str
    created_by: int = Field(..., description="Id of the creating user")
    students_enrolled: List[int] = Field(default_factory=list)
    created_at: str = Field(default_factory=_utcnow)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
