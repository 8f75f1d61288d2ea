"""
Response decoding.

A Response wraps the raw bytes and metadata of one exchange. parse() turns the
body into element records: flat-ish dicts of field name to string or nested
value, ready for model hydration. Status codes are only interpreted by
raise_for_status(), so a Response always exists for any exchange that
produced one.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from urllib.parse import parse_qs
import json
import logging
import xml.etree.ElementTree as ElementTree

from ..runtime.errors import ResponseParseError, error_from_status

if TYPE_CHECKING:
    from ..transport.http import TransportResult
    from .request import Request

logger = logging.getLogger(__name__)

XML_CONTENT_TYPES = ("text/xml", "application/xml")
JSON_CONTENT_TYPES = ("application/json",)
FORM_CONTENT_TYPES = ("text/html", "text/plain", "application/x-www-form-urlencoded")

ROOT_ERROR_FIELDS = ("ErrorNumber", "Type", "Message")

RATE_LIMIT_PROBLEM = "rate limit exceeded"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _is_plural_of(parent: str, child: str) -> bool:
    if parent in (child + "s", child + "es"):
        return True
    return child.endswith("y") and parent == child[:-1] + "ies"


def xml_to_value(element: ElementTree.Element) -> Any:
    """
    Convert an XML element to plain Python values.

    Leaves become strings. Containers whose children repeat one tag, or are
    the plural of their only child's tag (``LineItems/LineItem``), become
    lists; anything else becomes a dict keyed by child tag.
    """
    children = list(element)
    if not children:
        return (element.text or "").strip()

    tag = _local_name(element.tag)
    child_tags = {_local_name(child.tag) for child in children}
    if len(child_tags) == 1:
        child_tag = next(iter(child_tags))
        if len(children) > 1 or _is_plural_of(tag, child_tag):
            return [xml_to_value(child) for child in children]

    result: Dict[str, Any] = {}
    for child in children:
        result[_local_name(child.tag)] = xml_to_value(child)
    return result


class Response:
    """Decoded result of one Request."""

    def __init__(self, request: "Request", body: bytes, info: "TransportResult"):
        self._request = request
        self._body = body or b""
        self._info = info
        self._elements: List[Dict[str, Any]] = []
        self._root_error: Dict[str, Any] = {}
        self._element_errors: List[str] = []
        self._oauth_problem: Dict[str, str] = {}
        self._parsed = False

    def parse(self) -> None:
        """
        Decode the body according to its content type.

        Raises:
            ResponseParseError: If an XML or JSON body is malformed
        """
        content_type = self.get_content_type()
        if self._body.strip():
            if content_type in XML_CONTENT_TYPES:
                self._parse_xml()
            elif content_type in JSON_CONTENT_TYPES:
                self._parse_json()
            elif content_type in FORM_CONTENT_TYPES:
                self._parse_form()
        self._parsed = True
        logger.debug(f"Parsed {len(self._elements)} element(s) from {content_type or 'untyped'} response")

    def _parse_xml(self) -> None:
        try:
            root = ElementTree.fromstring(self._body)
        except ElementTree.ParseError as e:
            raise ResponseParseError(f"Invalid XML response: {e}", self.get_status(), e)

        for child in root:
            name = _local_name(child.tag)
            if name in ROOT_ERROR_FIELDS:
                self._root_error[name] = (child.text or "").strip()
            elif name == "Elements":
                for element in child:
                    value = xml_to_value(element)
                    if isinstance(value, dict):
                        self._add_element(value)
            else:
                # Only the collection node has element children; Id, Status etc. are leaves
                for element in child:
                    value = xml_to_value(element)
                    if isinstance(value, dict):
                        self._add_element(value)

    def _parse_json(self) -> None:
        try:
            data = json.loads(self._body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ResponseParseError(f"Invalid JSON response: {e}", self.get_status(), e)

        if isinstance(data, list):
            for item in data:
                if isinstance(item, dict):
                    self._add_element(item)
            return

        if not isinstance(data, dict):
            raise ResponseParseError(f"Unexpected JSON document: {type(data).__name__}", self.get_status())

        for name in ROOT_ERROR_FIELDS:
            if name in data:
                self._root_error[name] = data[name]

        # Records live under the first list-valued key; later lists (Warnings etc.) are not records
        for value in data.values():
            if isinstance(value, list):
                for item in value:
                    if isinstance(item, dict):
                        self._add_element(item)
                break

    def _parse_form(self) -> None:
        text = self._body.decode("utf-8", errors="replace")
        parsed = parse_qs(text.strip())
        if "oauth_problem" in parsed:
            self._oauth_problem = {key: values[0] for key, values in parsed.items()}

    def _add_element(self, element: Dict[str, Any]) -> None:
        self._elements.append(element)
        for error in element.get("ValidationErrors") or []:
            if isinstance(error, dict) and error.get("Message"):
                self._element_errors.append(error["Message"])

    def get_elements(self) -> List[Dict[str, Any]]:
        return self._elements

    def get_request(self) -> "Request":
        return self._request

    def get_info(self) -> "TransportResult":
        return self._info

    def get_status(self) -> int:
        return self._info.status

    def get_headers(self) -> Dict[str, str]:
        return self._info.headers

    def get_body(self) -> bytes:
        return self._body

    def get_elapsed(self) -> float:
        return self._info.elapsed

    def get_content_type(self) -> Optional[str]:
        """Media type without parameters, lowercased."""
        if not self._info.content_type:
            return None
        return self._info.content_type.split(";", 1)[0].strip().lower()

    def get_root_error(self) -> Dict[str, Any]:
        return self._root_error

    def get_element_errors(self) -> List[str]:
        return self._element_errors

    def get_oauth_problem(self) -> Dict[str, str]:
        return self._oauth_problem

    def get_error_message(self) -> Optional[str]:
        if self._root_error.get("Message"):
            return str(self._root_error["Message"])
        if self._oauth_problem:
            problem = self._oauth_problem.get("oauth_problem", "")
            advice = self._oauth_problem.get("oauth_problem_advice")
            return f"{problem}: {advice}" if advice else problem
        return None

    def is_rate_limited(self) -> bool:
        if self._oauth_problem.get("oauth_problem") == RATE_LIMIT_PROBLEM:
            return True
        return "X-Rate-Limit-Problem" in self._info.headers

    def is_success(self) -> bool:
        return 200 <= self.get_status() < 300

    def raise_for_status(self) -> None:
        """
        Raise the matching ResponseError for an error status.

        2xx and 304 (not modified) are not errors.
        """
        details: Dict[str, Any] = {}
        if self._root_error:
            details["root_error"] = dict(self._root_error)
        if self._element_errors:
            details["validation_errors"] = list(self._element_errors)
        if self._oauth_problem:
            details["oauth_problem"] = dict(self._oauth_problem)

        error = error_from_status(self.get_status(), self.get_error_message(), details,
                                  rate_limited=self.is_rate_limited())
        if error is not None:
            raise error

    def __repr__(self) -> str:
        return f"Response(status={self.get_status()}, elements={len(self._elements)})"


__all__ = ["Response", "xml_to_value"]
