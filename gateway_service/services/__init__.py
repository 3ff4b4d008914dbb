"""
Request routing services for the gateway
"""

from .forwarder import ProxiedRequest, ProxyForwarder, TransportFailure
from .registry import BackendRegistry
from .translator import ResponseTranslator

__all__ = [
    "BackendRegistry",
    "ProxiedRequest",
    "ProxyForwarder",
    "TransportFailure",
    "ResponseTranslator",
]
