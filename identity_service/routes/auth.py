"""
Authentication Routes
User creation and login
"""

from fastapi import APIRouter, Depends, Request, status
import structlog

from identity_service.models.user import UserCredentials, UserPublic
from identity_service.services.auth_service import AuthService

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_auth_service(request: Request) -> AuthService:
    """Dependency to get the auth service instance"""
    return request.app.state.auth_service


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_user(
    credentials: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Create a new user account"""
    user = await auth_service.create_user(credentials)
    public = UserPublic(id=user.id, name=user.name, created_at=user.created_at)
    return {
        "message": "User created successfully",
        "user": public.model_dump(by_alias=True)
    }


@router.post("/login")
async def login(
    credentials: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Log in and receive an access token"""
    token, user = await auth_service.login(credentials)
    public = UserPublic(id=user.id, name=user.name)
    return {
        "message": "Login successful",
        "accessToken": token,
        "user": public.model_dump(by_alias=True, exclude_none=True)
    }
