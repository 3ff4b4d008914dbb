"""
Health check routes for identity service
"""

from fastapi import APIRouter, Request

from campus_shared import __version__

router = APIRouter()


@router.get("/")
async def root(request: Request):
    """Root endpoint"""
    return {
        "message": "Auth Service is running",
        "users": await request.app.state.users.count()
    }


@router.get("/health")
async def health_check():
    """Service health check"""
    return {
        "service": "identity-service",
        "status": "healthy",
        "version": __version__
    }
