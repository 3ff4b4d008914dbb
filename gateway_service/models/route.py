"""
Route descriptors

One RouteDescriptor per endpoint the gateway exposes. The table is built
once at import and never changes.
"""

from dataclasses import dataclass
from enum import Enum

WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})


class Resource(str, Enum):
    """Logical backend a route targets"""
    IDENTITY = "identity"
    STUDENT = "student"
    COURSE = "course"


@dataclass(frozen=True)
class RouteDescriptor:
    """Static definition of one gateway endpoint and its backend call"""
    name: str
    method: str
    path: str
    resource: Resource
    target_path: str
    requires_auth: bool
    success_message: str
    failure_message: str
    expose_identity: bool = False

    @property
    def sends_body(self) -> bool:
        return self.method in WRITE_METHODS
