"""
Health check routes for course service
"""

from fastapi import APIRouter, Request

from campus_shared import __version__

router = APIRouter()


@router.get("/")
async def root(request: Request):
    """Root endpoint"""
    return {
        "message": "Course Service is running",
        "courses": await request.app.state.courses.count()
    }


@router.get("/health")
async def health_check():
    """Service health check"""
    return {
        "service": "course-service",
        "status": "healthy",
        "version": __version__
    }
