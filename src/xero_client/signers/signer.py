"""
Base signer interface.

A signer attaches authorization material to a Request before it is sent.
The Request calls sign() exactly once per send(); implementations must still
be safe to call again on the same request (a second call replaces the
previous authorization).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..runtime.errors import XeroError

if TYPE_CHECKING:
    from ..remote.request import Request


class SignerError(XeroError):
    """Base exception for signer operations."""
    pass


class Signer(ABC):
    """Signing interface consumed by Request.send()."""

    @abstractmethod
    def sign(self, request: "Request") -> None:
        """
        Attach authorization to the request, usually the Authorization header.

        Args:
            request: Request about to be sent

        Raises:
            SignerError: If signing fails
        """
        pass


class NullSigner(Signer):
    """Leaves requests untouched, for public endpoints and local testing."""

    def sign(self, request: "Request") -> None:
        return None


__all__ = [
    "SignerError",
    "Signer",
    "NullSigner",
]
