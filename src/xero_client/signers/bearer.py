"""
OAuth 2 bearer-token signing.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from ..runtime.errors import ConfigurationError
from .signer import Signer

if TYPE_CHECKING:
    from ..remote.request import Request

HEADER_TENANT_ID = "Xero-tenant-id"


class BearerTokenSigner(Signer):
    """Adds an access token, and the tenant the call is for when known."""

    def __init__(self, access_token: str, tenant_id: Optional[str] = None):
        if not access_token:
            raise ConfigurationError("access_token must not be empty")
        self.access_token = access_token
        self.tenant_id = tenant_id

    def sign(self, request: "Request") -> None:
        request.set_header(request.HEADER_AUTHORIZATION, f"Bearer {self.access_token}")
        if self.tenant_id:
            request.set_header(HEADER_TENANT_ID, self.tenant_id)


__all__ = ["BearerTokenSigner", "HEADER_TENANT_ID"]
