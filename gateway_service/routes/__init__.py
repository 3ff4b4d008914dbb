"""
API routes for the gateway
"""

from . import health, proxy, table

__all__ = ["health", "proxy", "table"]
