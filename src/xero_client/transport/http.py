"""
HTTP transport for the Xero client.

A transport performs one synchronous exchange and hands back the raw result.
It does not retry and does not interpret status codes: any response that
arrives is returned, and only a failure to obtain a response at all is raised
as a TransportError.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union
import logging

import requests

from ..runtime.errors import TransportError
from ..runtime.helpers import parse_header_lines

logger = logging.getLogger(__name__)


@dataclass
class TransportResult:
    """Raw outcome of one HTTP exchange."""
    status: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    content_type: Optional[str] = None
    elapsed: float = 0.0
    header_out: List[str] = field(default_factory=list)
    url: str = ""


class Transport(ABC):
    """Interface used by Request to put bytes on the wire."""

    @abstractmethod
    def dispatch(self, method: str, url: str, header_lines: List[str],
                 body: Optional[bytes] = None) -> TransportResult:
        """
        Perform the exchange.

        Args:
            method: HTTP method
            url: Full target URL including the query string
            header_lines: Outgoing headers as ``Key: Value`` lines
            body: Payload for body-carrying methods

        Returns:
            The raw result

        Raises:
            TransportError: If no response could be obtained
        """
        pass

    def close(self) -> None:
        """Release any held connections."""


class RequestsTransport(Transport):
    """Transport backed by a requests.Session."""

    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True,
                 user_agent: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Verify TLS certificates
            user_agent: User-Agent header sent unless the request sets one
            session: Optional requests.Session for connection pooling
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()

    def dispatch(self, method: str, url: str, header_lines: List[str],
                 body: Optional[Union[bytes, str]] = None) -> TransportResult:
        headers = parse_header_lines(header_lines)
        if self.user_agent and "User-Agent" not in headers:
            headers["User-Agent"] = self.user_agent

        if isinstance(body, str):
            body = body.encode("utf-8")

        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", details={"url": url}, cause=e)

        sent = response.request.headers if response.request is not None else headers
        return TransportResult(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
            content_type=response.headers.get("Content-Type"),
            elapsed=response.elapsed.total_seconds() if response.elapsed is not None else 0.0,
            header_out=[f"{name}: {value}" for name, value in sent.items()],
            url=response.url or url,
        )


__all__ = [
    "TransportResult",
    "Transport",
    "RequestsTransport",
]
