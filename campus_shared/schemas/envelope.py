"""
Response envelopes

Every client-facing failure is an ErrorEnvelope; every gateway success is
a SuccessEnvelope.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorEnvelope(BaseModel):
    """Normalized failure body"""
    model_config = ConfigDict(extra="allow")

    error: str = Field(..., description="Short failure label")
    message: Any = Field(
        ..., description="Human readable detail or the upstream error payload"
    )


class SuccessEnvelope(BaseModel):
    """Normalized gateway success body"""
    model_config = ConfigDict(extra="allow")

    message: str = Field(..., description="What the gateway did")
    data: Any = Field(None, description="Backend payload, unmodified")
    user: Optional[Dict[str, Any]] = Field(None, description="Caller claims, when exposed")
