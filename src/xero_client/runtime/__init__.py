"""Runtime helpers for the Xero client"""

from .errors import XeroError, ErrorCode
from .helpers import escape, flatten_mapping, build_query_string, build_header_lines

__all__ = [
    "XeroError",
    "ErrorCode",
    "escape",
    "flatten_mapping",
    "build_query_string",
    "build_header_lines",
]
