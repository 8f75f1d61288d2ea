"""
Serialization helpers shared by requests and signers.
"""

from __future__ import annotations
from typing import Any, List, Mapping, Optional, Union
from urllib.parse import quote


def escape(value: Any) -> str:
    """
    Percent-encode a value per RFC 3986.

    Only unreserved characters (letters, digits, ``-._~``) are left as-is,
    which is also what OAuth 1.0a requires for signature base strings.
    """
    return quote(stringify(value), safe="~")


def stringify(value: Any) -> str:
    """Render a parameter or header value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def flatten_mapping(mapping: Mapping[str, Any], fmt: str, glue: Optional[str] = None,
                    escape_values: bool = False) -> Union[str, List[str]]:
    """
    Flatten a mapping into formatted ``key``/``value`` entries.

    Args:
        mapping: Mapping to flatten
        fmt: printf-style format taking the key and the value, e.g. ``"%s=%s"``
        glue: String used to join the entries; without one the list is returned
        escape_values: Percent-encode keys and values before formatting

    Returns:
        The joined string, or the list of entries when no glue is given
    """
    entries = []
    for key, value in mapping.items():
        if escape_values:
            entries.append(fmt % (escape(key), escape(value)))
        else:
            entries.append(fmt % (key, stringify(value)))

    if glue is None:
        return entries
    return glue.join(entries)


def build_query_string(parameters: Mapping[str, Any]) -> str:
    """Encode parameters as an ``&``-joined, percent-encoded query string."""
    return flatten_mapping(parameters, "%s=%s", "&", True)


def build_header_lines(headers: Mapping[str, Any]) -> List[str]:
    """Flatten headers into ``Key: Value`` lines."""
    return flatten_mapping(headers, "%s: %s")


def parse_header_lines(lines: List[str]) -> dict:
    """Turn ``Key: Value`` lines back into a header mapping."""
    headers = {}
    for line in lines:
        name, _, value = line.partition(":")
        headers[name.strip()] = value.strip()
    return headers


__all__ = [
    "escape",
    "stringify",
    "flatten_mapping",
    "build_query_string",
    "build_header_lines",
    "parse_header_lines",
]
