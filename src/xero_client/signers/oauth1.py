"""
OAuth 1.0a request signing (RFC 5849).

Supports HMAC-SHA1 (public and partner style apps with a consumer secret) and
RSA-SHA1 (private apps signing with an uploaded key pair).
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple, Union, TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit
import base64
import hashlib
import hmac
import logging
import secrets
import time

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..runtime.errors import ConfigurationError
from ..runtime.helpers import escape
from .signer import Signer, SignerError

if TYPE_CHECKING:
    from ..remote.request import Request

logger = logging.getLogger(__name__)

SIGNATURE_HMAC = "HMAC-SHA1"
SIGNATURE_RSA = "RSA-SHA1"

OAUTH_VERSION = "1.0"


def normalize_url(url: str) -> str:
    """Base string URI: lowercase scheme and host, no default port, no query."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    netloc = parts.netloc.lower()
    if (scheme == "http" and netloc.endswith(":80")) or (scheme == "https" and netloc.endswith(":443")):
        netloc = netloc.rsplit(":", 1)[0]
    return urlunsplit((scheme, netloc, parts.path or "/", "", ""))


def normalize_parameters(params: List[Tuple[str, Any]]) -> str:
    """Encode, sort and join parameters for the signature base string."""
    encoded = sorted((escape(key), escape(value)) for key, value in params)
    return "&".join(f"{key}={value}" for key, value in encoded)


class OAuth1Signer(Signer):
    """Signs requests with OAuth 1.0a credentials."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str = "",
        token: Optional[str] = None,
        token_secret: Optional[str] = None,
        signature_method: str = SIGNATURE_HMAC,
        rsa_private_key: Optional[Union[bytes, str]] = None,
        rsa_key_password: Optional[bytes] = None,
        nonce_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Args:
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret (HMAC-SHA1)
            token: Access token; private apps use the consumer key
            token_secret: Access token secret
            signature_method: ``HMAC-SHA1`` or ``RSA-SHA1``
            rsa_private_key: PEM private key, required for RSA-SHA1
            rsa_key_password: Password for an encrypted PEM key
            nonce_factory: Override for nonce generation
            clock: Override for the Unix timestamp source
        """
        if signature_method not in (SIGNATURE_HMAC, SIGNATURE_RSA):
            raise ConfigurationError(f"Unsupported OAuth signature method [{signature_method}]")

        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.token = token
        self.token_secret = token_secret
        self.signature_method = signature_method
        self._nonce_factory = nonce_factory or (lambda: secrets.token_hex(16))
        self._clock = clock or (lambda: int(time.time()))
        self._private_key = None

        if signature_method == SIGNATURE_RSA:
            if rsa_private_key is None:
                raise ConfigurationError("RSA-SHA1 signing requires rsa_private_key")
            if isinstance(rsa_private_key, str):
                rsa_private_key = rsa_private_key.encode("ascii")
            try:
                self._private_key = serialization.load_pem_private_key(rsa_private_key, password=rsa_key_password)
            except (ValueError, TypeError) as e:
                raise ConfigurationError(f"Could not load RSA private key: {e}", cause=e)
            if not isinstance(self._private_key, rsa.RSAPrivateKey):
                raise ConfigurationError("Key is not an RSA private key")

    def get_oauth_parameters(self) -> Dict[str, str]:
        """Fresh protocol parameters for one signature, without the signature."""
        params = {
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": self.signature_method,
            "oauth_timestamp": str(self._clock()),
            "oauth_version": OAUTH_VERSION,
        }
        if self.token is not None:
            params["oauth_token"] = self.token
        return params

    def signature_base_string(self, request: "Request", oauth_params: Dict[str, str]) -> str:
        url = request.get_url()
        base_url = url.get_full_url() if hasattr(url, "get_full_url") else str(url)

        params = list(request.get_parameters().items()) + list(oauth_params.items())
        return "&".join([
            request.get_method().upper(),
            escape(normalize_url(base_url)),
            escape(normalize_parameters(params)),
        ])

    def compute_signature(self, base_string: str) -> str:
        message = base_string.encode("utf-8")
        if self.signature_method == SIGNATURE_HMAC:
            key = f"{escape(self.consumer_secret)}&{escape(self.token_secret or '')}"
            digest = hmac.new(key.encode("utf-8"), message, hashlib.sha1).digest()
        else:
            try:
                digest = self._private_key.sign(message, padding.PKCS1v15(), hashes.SHA1())
            except ValueError as e:
                raise SignerError(f"RSA signing failed: {e}", cause=e)
        return base64.b64encode(digest).decode("ascii")

    def sign(self, request: "Request") -> None:
        oauth_params = self.get_oauth_parameters()
        base_string = self.signature_base_string(request, oauth_params)
        oauth_params["oauth_signature"] = self.compute_signature(base_string)

        logger.debug(f"Signed {request.get_method()} request with {self.signature_method}")

        header = ", ".join(f'{escape(key)}="{escape(value)}"' for key, value in sorted(oauth_params.items()))
        request.set_header(request.HEADER_AUTHORIZATION, f"OAuth {header}")


__all__ = [
    "SIGNATURE_HMAC",
    "SIGNATURE_RSA",
    "normalize_url",
    "normalize_parameters",
    "OAuth1Signer",
]
