"""
Shared building blocks for the campus services

Settings, logging, error envelopes, credential verification and record
storage used by the gateway and every backend.
"""

__version__ = "1.0.0"
