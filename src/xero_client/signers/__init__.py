"""
Request signers.

A signer receives a Request right before dispatch and attaches its
Authorization header.
"""

from .signer import Signer, SignerError, NullSigner
from .oauth1 import OAuth1Signer, SIGNATURE_HMAC, SIGNATURE_RSA
from .bearer import BearerTokenSigner

__all__ = [
    "Signer",
    "SignerError",
    "NullSigner",
    "OAuth1Signer",
    "SIGNATURE_HMAC",
    "SIGNATURE_RSA",
    "BearerTokenSigner",
]
