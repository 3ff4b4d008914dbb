"""
User data models and schemas
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


# Request body for both /auth/create and /auth/login; presence is checked
# by the service so missing fields produce a 400 envelope.
class UserCredentials(BaseModel):
    """Name and password as sent by the client"""
    name: Optional[str] = None
    password: Optional[str] = None


class User(BaseModel):
    """Stored user record"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    password_hash: str = Field(..., exclude=True)
    created_at: str = Field(default_factory=_utcnow)


class UserPublic(BaseModel):
    """User as returned to clients"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    created_at: Optional[str] = None
