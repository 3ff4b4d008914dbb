"""
Utility modules shared by the campus services
"""

from .credentials import CredentialVerifier, VerifiedIdentity, get_current_identity
from .errors import (
    Conflict,
    InvalidCredential,
    MissingCredential,
    NotFound,
    ServiceError,
    UpstreamError,
    UpstreamUnavailable,
    ValidationError,
    install_exception_handlers,
)
from .logger import setup_logging
from .storage import InMemoryRecordStore, RecordStore, parse_record_id

__all__ = [
    "CredentialVerifier",
    "VerifiedIdentity",
    "get_current_identity",
    "ServiceError",
    "MissingCredential",
    "InvalidCredential",
    "ValidationError",
    "NotFound",
    "Conflict",
    "UpstreamUnavailable",
    "UpstreamError",
    "install_exception_handlers",
    "setup_logging",
    "RecordStore",
    "InMemoryRecordStore",
    "parse_record_id",
]
