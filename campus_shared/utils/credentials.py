"""
Credential verification

Validates bearer tokens against the shared secret. Used by the gateway
before it forwards anything and by every backend, which re-verifies the
forwarded header on its own.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import jwt
import structlog
from fastapi import Request
from pydantic import BaseModel, Field

from campus_shared.utils.errors import InvalidCredential, MissingCredential

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer"
REQUIRED_CLAIMS = ["sub", "name", "iat", "exp"]


class VerifiedIdentity(BaseModel):
    """Claims carried by a valid token; lives for one request"""
    user_id: int = Field(..., description="Subject identifier")
    name: str = Field(..., description="Display name")
    issued_at: datetime
    expires_at: datetime

    def as_claims(self) -> Dict[str, Any]:
        """Wire form, matching what the identity service embeds"""
        return {
            "userId": self.user_id,
            "name": self.name,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header value

    Raises:
        MissingCredential: header absent or empty
        InvalidCredential: header present but not 'Bearer <token>'
    """
    if not authorization:
        raise MissingCredential("No authorization token was sent")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_PREFIX or not parts[1]:
        raise InvalidCredential("Forbidden: Invalid token")
    return parts[1]


class CredentialVerifier:
    """Stateless bearer token verifier bound to one secret"""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self._algorithm = algorithm

    def verify(self, token: str) -> VerifiedIdentity:
        """
        Decode and validate a token

        Returns the claims exactly as embedded at issuance. Subject
        existence is not checked here.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Token rejected", reason="expired")
            raise InvalidCredential("Forbidden: Invalid token")
        except jwt.InvalidTokenError as e:
            logger.info("Token rejected", reason=str(e))
            raise InvalidCredential("Forbidden: Invalid token")

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            logger.info("Token rejected", reason="non-numeric subject")
            raise InvalidCredential("Forbidden: Invalid token")

        return VerifiedIdentity(
            user_id=user_id,
            name=str(payload["name"]),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def verify_authorization(self, authorization: Optional[str]) -> VerifiedIdentity:
        """Verify a raw Authorization header value"""
        return self.verify(extract_bearer_token(authorization))


async def get_current_identity(request: Request) -> VerifiedIdentity:
    """FastAPI dependency: verify the caller with the app's verifier"""
    verifier: CredentialVerifier = request.app.state.verifier
    return verifier.verify_authorization(request.headers.get("authorization"))
