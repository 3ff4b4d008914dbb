"""
Proxy forwarder

Turns a verified inbound request into the equivalent backend call. The
caller's Authorization header is passed through verbatim; backends
re-verify it against the shared secret themselves.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import httpx
import structlog

from campus_shared.utils.credentials import VerifiedIdentity
from campus_shared.utils.errors import UpstreamUnavailable
from campus_shared.utils.storage import parse_record_id
from gateway_service.models.route import RouteDescriptor
from gateway_service.services.registry import BackendRegistry

logger = structlog.get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/json"


class TransportFailure(UpstreamUnavailable):
    """The backend could not be reached; no HTTP response exists"""


@dataclass
class ProxiedRequest:
    """Outbound representation of one inbound call"""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None


def coerce_path_param(value: Any) -> Any:
    """Integer-looking path parameters become ints; anything else is kept as-is"""
    record_id = parse_record_id(value)
    return value if record_id is None else record_id


class ProxyForwarder:
    """
    Issues backend calls for gateway routes.

    When no client is injected a fresh httpx.AsyncClient is opened per
    call; there is no pooling, retry or circuit breaking.
    """

    def __init__(
        self,
        registry: BackendRegistry,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 5.0,
    ):
        self.registry = registry
        self._client = client
        self.timeout = timeout

    def build_request(
        self,
        route: RouteDescriptor,
        path_params: Mapping[str, Any],
        body: Optional[bytes],
        authorization: Optional[str],
        content_type: Optional[str] = None,
    ) -> ProxiedRequest:
        """Resolve the backend and substitute path parameters"""
        base_url = self.registry.resolve(route.resource)
        params = {
            key: quote(str(coerce_path_param(value)), safe="")
            for key, value in path_params.items()
        }
        request = ProxiedRequest(
            method=route.method,
            url=f"{base_url}{route.target_path.format(**params)}",
        )

        if authorization:
            request.headers["Authorization"] = authorization

        if route.sends_body and body:
            request.content = body
            request.headers["Content-Type"] = content_type or DEFAULT_CONTENT_TYPE

        return request

    async def send(self, request: ProxiedRequest) -> httpx.Response:
        """Send a prepared request, mapping transport errors to TransportFailure"""
        try:
            if self._client is not None:
                return await self._client.request(
                    request.method, request.url, headers=request.headers, content=request.content
                )
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.request(
                    request.method, request.url, headers=request.headers, content=request.content
                )
        except httpx.RequestError as e:
            logger.error(
                "Backend unreachable",
                method=request.method,
                url=request.url,
                error=str(e) or e.__class__.__name__,
            )
            raise TransportFailure(f"Failed to connect to backend: {str(e) or e.__class__.__name__}")

    async def forward(
        self,
        route: RouteDescriptor,
        identity: Optional[VerifiedIdentity],
        path_params: Mapping[str, Any],
        body: Optional[bytes],
        authorization: Optional[str],
        content_type: Optional[str] = None,
    ) -> httpx.Response:
        """
        Forward one request to its backend

        Returns the backend's response whatever its status. Raises
        TransportFailure when no response could be obtained.
        """
        request = self.build_request(route, path_params, body, authorization, content_type)
        logger.info(
            "Forwarding request",
            route=route.name,
            resource=route.resource.value,
            method=request.method,
            url=request.url,
            user_id=identity.user_id if identity else None,
        )

        response = await self.send(request)

        logger.info(
            "Backend responded",
            route=route.name,
            resource=route.resource.value,
            status_code=response.status_code,
        )
        return response
