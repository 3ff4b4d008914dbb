"""
Student data models and schemas
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class StudentPayload(BaseModel):
    """Body of create, replace and partial update requests"""
    name: Optional[str] = None


class Student(BaseModel):
    """Stored student record, owned by the user who created it"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = None
    name: str
    user_id: int = Field(..., description="Owning user id")
    created_at: str = Field(default_factory=utcnow)
    updated_at: Optional[str] = None

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
