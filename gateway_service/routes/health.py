"""
Health check routes for the gateway
"""

from fastapi import APIRouter, Request

from campus_shared import __version__
from gateway_service.models.route import Resource

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Gateway Service is running",
        "status": "healthy"
    }


@router.get("/health")
async def health_check(request: Request):
    """Service health check"""
    return {
        "service": "api-gateway",
        "status": "healthy",
        "version": __version__,
        "backends": {
            resource.value: request.app.state.registry.resolve(resource)
            for resource in Resource
        }
    }
