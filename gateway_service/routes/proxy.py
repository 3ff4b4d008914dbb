"""
Gateway router

Each inbound request is handled in a single pass: verify the caller if
the route needs it, forward to the backend, translate the outcome. A
rejected credential never reaches a backend.
"""

from typing import Optional, Sequence

from fastapi import APIRouter, Request, Response
import structlog

from campus_shared.utils.credentials import CredentialVerifier, VerifiedIdentity
from gateway_service.models.route import RouteDescriptor
from gateway_service.routes.table import ROUTE_TABLE
from gateway_service.services.forwarder import ProxyForwarder, TransportFailure
from gateway_service.services.translator import ResponseTranslator

logger = structlog.get_logger(__name__)


async def handle(route: RouteDescriptor, request: Request) -> Response:
    """Drive one request through verify, forward and translate"""
    state = request.app.state
    verifier: CredentialVerifier = state.verifier
    forwarder: ProxyForwarder = state.forwarder
    translator: ResponseTranslator = state.translator

    authorization = request.headers.get("authorization")

    identity: Optional[VerifiedIdentity] = None
    if route.requires_auth:
        # MissingCredential / InvalidCredential propagate to the 401/403 handler
        identity = verifier.verify_authorization(authorization)

    body = await request.body() if route.sends_body else None

    try:
        outcome = await forwarder.forward(
            route,
            identity,
            request.path_params,
            body,
            authorization,
            content_type=request.headers.get("content-type"),
        )
    except TransportFailure as e:
        outcome = e

    return translator.translate(route, outcome, identity)


def _make_endpoint(route: RouteDescriptor):
    async def endpoint(request: Request) -> Response:
        return await handle(route, request)

    endpoint.__name__ = route.name
    endpoint.__doc__ = f"{route.method} {route.path} -> {route.resource.value} {route.target_path}"
    return endpoint


def build_proxy_router(routes: Sequence[RouteDescriptor] = ROUTE_TABLE) -> APIRouter:
    """One FastAPI route per descriptor"""
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            _make_endpoint(route),
            methods=[route.method],
            name=route.name,
            tags=[route.resource.value],
        )
    return router
