"""
Remote access layer: requests, responses, queries and result collections.
"""

from .collection import Collection
from .model import RemoteModel
from .url import URL
from .response import Response
from .request import Request
from .query import Query

__all__ = [
    "Collection",
    "RemoteModel",
    "URL",
    "Response",
    "Request",
    "Query",
]
