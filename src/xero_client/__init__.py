"""
Xero Python Client

Client-side access layer for the Xero accounting API: signed requests, a
fluent query builder and result collections that keep their owning objects'
dirty state up to date.
"""

from ._version import __version__

from .config import ApplicationConfig, RequestDefaults
from .application import Application
from .runtime.errors import *
from .remote import Collection, RemoteModel, URL, Response, Request, Query
from .signers import Signer, NullSigner, OAuth1Signer, BearerTokenSigner
from .transport import Transport, TransportResult, RequestsTransport
from .models import ModelRegistry, default_registry

__all__ = [
    "__version__",

    # Application
    "Application",
    "ApplicationConfig",
    "RequestDefaults",

    # Remote access
    "Collection",
    "RemoteModel",
    "URL",
    "Response",
    "Request",
    "Query",

    # Signing
    "Signer",
    "NullSigner",
    "OAuth1Signer",
    "BearerTokenSigner",

    # Transport
    "Transport",
    "TransportResult",
    "RequestsTransport",

    # Models
    "ModelRegistry",
    "default_registry",

    # All error types are included via *
]
