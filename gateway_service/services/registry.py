"""
Backend registry: logical resource to base URL
"""

from types import MappingProxyType
from typing import Mapping

from gateway_service.config import GatewaySettings
from gateway_service.models.route import Resource


class BackendRegistry:
    """Read-only mapping of every Resource to its backend base URL"""

    def __init__(self, targets: Mapping[Resource, str]):
        self._targets = MappingProxyType(
            {resource: url.rstrip("/") for resource, url in targets.items()}
        )

    @classmethod
    def from_settings(cls, settings: GatewaySettings) -> "BackendRegistry":
        return cls({
            Resource.IDENTITY: settings.identity_service_url,
            Resource.STUDENT: settings.student_service_url,
            Resource.COURSE: settings.course_service_url,
        })

    def resolve(self, resource: Resource) -> str:
        # A missing resource means the route table and registry disagree,
        # which is a programming error rather than a request failure.
        return self._targets[resource]

    def __repr__(self) -> str:
        targets = ", ".join(f"{r.value}={url}" for r, url in self._targets.items())
        return f"BackendRegistry({targets})"
