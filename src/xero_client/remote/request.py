"""
Handles dispatching actual requests to the API.

A Request is a one-shot exchange: configure headers, parameters and an
optional body, then send() it once. Sending signs the request, serializes it,
hands it to the Application's transport and stores the parsed Response.
setBody gives low-level access for payloads the models cannot express.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Union, TYPE_CHECKING
import logging

from ..config import (
    RequestDefaults, CONTENT_TYPE_HTML, CONTENT_TYPE_XML, CONTENT_TYPE_JSON, CONTENT_TYPE_PDF,
)
from ..runtime.errors import AlreadySentError, InvalidMethodError
from ..runtime.helpers import build_header_lines, build_query_string
from .response import Response
from .url import URL

if TYPE_CHECKING:
    from ..application import Application

logger = logging.getLogger(__name__)


class Request:
    """One HTTP exchange with the API."""

    METHOD_GET = "GET"
    METHOD_PUT = "PUT"
    METHOD_POST = "POST"
    METHOD_DELETE = "DELETE"

    METHODS = (METHOD_GET, METHOD_PUT, METHOD_POST, METHOD_DELETE)

    CONTENT_TYPE_HTML = CONTENT_TYPE_HTML
    CONTENT_TYPE_XML = CONTENT_TYPE_XML
    CONTENT_TYPE_JSON = CONTENT_TYPE_JSON
    CONTENT_TYPE_PDF = CONTENT_TYPE_PDF

    HEADER_ACCEPT = "Accept"
    HEADER_CONTENT_TYPE = "Content-Type"
    HEADER_CONTENT_LENGTH = "Content-Length"
    HEADER_AUTHORIZATION = "Authorization"
    HEADER_IF_MODIFIED_SINCE = "If-Modified-Since"

    def __init__(self, app: "Application", url: Union[URL, str], method: str = METHOD_GET,
                 defaults: Optional[RequestDefaults] = None):
        """
        Create a new request.

        Args:
            app: The application used to sign and dispatch the request
            url: The URL to call
            method: The HTTP method to use
            defaults: Accept/Content-Type defaults; taken from the
                application's configuration when omitted

        Raises:
            InvalidMethodError: When an unsupported method is given
        """
        if method not in self.METHODS:
            raise InvalidMethodError(method)

        self._app = app
        self._url = url
        self._method = method
        self._defaults = defaults or app.config.request_defaults
        self._headers: Dict[str, str] = {}
        self._parameters: Dict[str, Any] = {}
        self._body: Optional[Union[bytes, str]] = None
        self._response: Optional[Response] = None

        self.set_header(self.HEADER_ACCEPT, self._defaults.accept)

    def send(self) -> Response:
        """
        Sign and send the request.

        Returns:
            The parsed Response, also available through get_response()

        Raises:
            AlreadySentError: If this request was sent before
            TransportError: If no response could be obtained
        """
        if self._response is not None:
            raise AlreadySentError()

        # Signing reads the current headers and parameters
        self._app.signer.sign(self)

        header_lines = build_header_lines(self._headers)

        full_url = self.get_full_url()

        body = None
        if self._body is not None:
            body = self._body.encode("utf-8") if isinstance(self._body, str) else self._body

        logger.debug(f"Request: {self._method} {full_url}")

        result = self._app.transport.dispatch(self._method, full_url, header_lines, body)

        logger.debug(f"Response: {result.status} for {self._method} {full_url} in {result.elapsed:.3f}s")

        response = Response(self, result.body, result)
        response.parse()
        self._response = response

        return self._response

    def get_full_url(self) -> str:
        """The target URL with the encoded query string, if there are parameters."""
        full_url = self._url.get_full_url() if isinstance(self._url, URL) else str(self._url)

        query_string = build_query_string(self._parameters)
        if query_string:
            full_url += f"?{query_string}"
        return full_url

    def set_parameter(self, key: str, value: Any) -> "Request":
        """Set a URL parameter."""
        self._parameters[key] = value
        return self

    def get_parameters(self) -> Dict[str, Any]:
        return self._parameters

    def get_header(self, key: str) -> Optional[str]:
        """
        Args:
            key: Name of the header

        Returns:
            The header value, or None if not defined
        """
        return self._headers.get(key)

    def get_headers(self) -> Dict[str, str]:
        return self._headers

    def set_header(self, key: str, value: Any) -> "Request":
        self._headers[key] = str(value)
        return self

    def get_response(self) -> Optional[Response]:
        """The response if the request has been sent, or None if it has not."""
        return self._response

    @property
    def response(self) -> Optional[Response]:
        return self._response

    @property
    def is_sent(self) -> bool:
        return self._response is not None

    def get_method(self) -> str:
        return self._method

    def get_url(self) -> Union[URL, str]:
        return self._url

    def get_body(self) -> Optional[Union[bytes, str]]:
        return self._body

    def set_body(self, body: Union[bytes, str], content_type: Optional[str] = None) -> "Request":
        """
        Set the request body and content type, for POST/PUT requests.

        The payload is sent as-is; it is not checked against the content type.

        Args:
            body: The request body
            content_type: The MIME content type, XML by default
        """
        if content_type is None:
            content_type = self._defaults.content_type

        length = len(body.encode("utf-8")) if isinstance(body, str) else len(body)
        self.set_header(self.HEADER_CONTENT_LENGTH, length)
        self.set_header(self.HEADER_CONTENT_TYPE, content_type)

        self._body = body
        return self

    def __repr__(self) -> str:
        return f"Request({self._method} '{self._url}')"


__all__ = ["Request"]
