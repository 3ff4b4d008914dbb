"""
Data models for the gateway
"""

from .route import Resource, RouteDescriptor, WRITE_METHODS

__all__ = ["Resource", "RouteDescriptor", "WRITE_METHODS"]
