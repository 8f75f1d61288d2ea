"""
Transport layer for the Xero client.

Provides the HTTP transport implementation.
"""

from .http import Transport, TransportResult, RequestsTransport

__all__ = [
    "Transport",
    "TransportResult",
    "RequestsTransport",
]
