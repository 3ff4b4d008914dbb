"""
Security utilities for the identity service

Password hashing and access token issuance. Tokens are verified by
campus_shared.utils.credentials.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
import structlog

logger = structlog.get_logger(__name__)

# bcrypt refuses longer input
MAX_PASSWORD_BYTES = 72


class SecurityUtils:
    """Security utilities class"""

    def __init__(self, jwt_secret: str, jwt_algorithm: str = "HS256"):
        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt

        Args:
            password: Plain text password

        Returns:
            Hashed password
        """
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        """
        Verify password against hash

        Args:
            password: Plain text password
            hashed_password: Hashed password

        Returns:
            True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError as e:
            logger.error("Failed to verify password", error=str(e))
            return False

    def generate_token(
        self,
        user_id: int,
        name: str,
        expires_in: int = 60,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Generate a signed access token

        Args:
            user_id: Subject identifier
            name: Display name
            expires_in: Expiration time in minutes
            now: Issue time, defaults to the current UTC time

        Returns:
            JWT token string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "name": name,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=expires_in),
        }
        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)
