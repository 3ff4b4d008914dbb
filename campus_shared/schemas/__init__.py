"""
Wire schemas shared by the campus services
"""

from .envelope import ErrorEnvelope, SuccessEnvelope

__all__ = ["ErrorEnvelope", "SuccessEnvelope"]
