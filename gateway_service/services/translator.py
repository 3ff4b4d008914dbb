"""
Response translator

Shapes every backend outcome into either a success envelope
{"message", "data"} or an Error Envelope {"error", "message"}.
"""

from typing import Any, Optional, Union

import httpx
import structlog
from fastapi.responses import JSONResponse

from campus_shared.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from campus_shared.utils.errors import UpstreamError
from campus_shared.utils.credentials import VerifiedIdentity
from gateway_service.models.route import RouteDescriptor
from gateway_service.services.forwarder import TransportFailure

logger = structlog.get_logger(__name__)

BackendOutcome = Union[httpx.Response, TransportFailure]


def read_body(response: httpx.Response) -> Any:
    """Decoded JSON when the backend sent JSON, otherwise the raw text"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ResponseTranslator:
    """Converts backend outcomes into gateway responses"""

    def translate(
        self,
        route: RouteDescriptor,
        outcome: BackendOutcome,
        identity: Optional[VerifiedIdentity] = None,
    ) -> JSONResponse:
        if isinstance(outcome, TransportFailure):
            return self.transport_failure(route, outcome)
        if outcome.is_error:
            return self.backend_error(route, outcome)
        return self.success(route, outcome, identity)

    def success(
        self,
        route: RouteDescriptor,
        response: httpx.Response,
        identity: Optional[VerifiedIdentity] = None,
    ) -> JSONResponse:
        envelope = SuccessEnvelope(message=route.success_message, data=read_body(response))
        exclude = {"user"}
        if route.expose_identity and identity is not None:
            envelope.user = identity.as_claims()
            exclude = set()
        return JSONResponse(
            status_code=response.status_code,
            content=envelope.model_dump(exclude=exclude),
        )

    def backend_error(self, route: RouteDescriptor, response: httpx.Response) -> JSONResponse:
        """Backend answered 4xx/5xx: keep its status, wrap its payload"""
        payload = read_body(response)
        if payload is None:
            payload = response.reason_phrase
        logger.info(
            "Backend returned error",
            route=route.name,
            status_code=response.status_code,
        )
        error = UpstreamError(
            payload, error=route.failure_message, status_code=response.status_code
        )
        return error.to_response()

    def transport_failure(self, route: RouteDescriptor, failure: TransportFailure) -> JSONResponse:
        """No response at all: always a 500"""
        envelope = ErrorEnvelope(error=route.failure_message, message=failure.message)
        return JSONResponse(status_code=failure.status_code, content=envelope.model_dump())
