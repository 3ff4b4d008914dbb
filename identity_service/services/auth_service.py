"""
Authentication Service
Account creation and token issuance
"""

import asyncio
from typing import Tuple

import structlog

from campus_shared.utils.errors import Conflict, NotFound, ServiceError, ValidationError
from campus_shared.utils.security import MAX_PASSWORD_BYTES, SecurityUtils
from campus_shared.utils.storage import RecordStore
from identity_service.models.user import User, UserCredentials

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ["name", "password"]


class InvalidPassword(ServiceError):
    status_code = 401
    error = "Invalid password"


class AuthService:
    """Creates users and logs them in"""

    def __init__(
        self,
        users: RecordStore[User],
        security: SecurityUtils,
        token_expire_minutes: int = 60,
    ):
        self.users = users
        self.security = security
        self.token_expire_minutes = token_expire_minutes

    async def hash_password(self, password: str) -> str:
        """Hash password using bcrypt in thread pool to avoid blocking"""
        return await asyncio.to_thread(self.security.hash_password, password)

    async def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify password against hash in thread pool to avoid blocking"""
        return await asyncio.to_thread(self.security.verify_password, password, hashed_password)

    async def create_user(self, credentials: UserCredentials) -> User:
        """
        Register a new user

        Raises:
            ValidationError: name or password missing, or password too long
            Conflict: a user with this name already exists
        """
        if not credentials.name or not credentials.password:
            raise ValidationError(
                "Both name and password must be provided",
                error="Missing required fields",
                extra={"required": REQUIRED_FIELDS},
            )

        if len(credentials.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes",
                error="Invalid password",
            )

        if await self.users.find_one(name=credentials.name):
            raise Conflict("User already exists", error="User already exists")

        password_hash = await self.hash_password(credentials.password)
        user = await self.users.insert(User(name=credentials.name, password_hash=password_hash))

        logger.info("User created", user_id=user.id)
        return user

    async def login(self, credentials: UserCredentials) -> Tuple[str, User]:
        """
        Authenticate a user and issue an access token

        Raises:
            ValidationError: name or password missing
            NotFound: no user with this name
            InvalidPassword: password does not match
        """
        if not credentials.name or not credentials.password:
            raise ValidationError(
                "Both name and password must be provided",
                error="Missing credentials",
                extra={"required": REQUIRED_FIELDS},
            )

        user = await self.users.find_one(name=credentials.name)
        if user is None:
            raise NotFound("User not found", error="User not found")

        if not await self.verify_password(credentials.password, user.password_hash):
            logger.info("Login rejected", user_id=user.id, reason="invalid password")
            raise InvalidPassword("Invalid password")

        token = self.security.generate_token(
            user.id, user.name, expires_in=self.token_expire_minutes
        )
        logger.info("User logged in", user_id=user.id)
        return token, user
