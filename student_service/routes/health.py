"""
Health check routes for student service
"""

from fastapi import APIRouter, Request

from campus_shared import __version__

router = APIRouter()


@router.get("/")
async def root(request: Request):
    """Root endpoint"""
    return {
        "message": "Student Service is running",
        "students": await request.app.state.students.count()
    }


@router.get("/health")
async def health_check():
    """Service health check"""
    return {
        "service": "student-service",
        "status": "healthy",
        "version": __version__
    }
