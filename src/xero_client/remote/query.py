"""
Lets you query an API endpoint.

Normally a query is started with ``app.load("Accounting.Contact")``; the
equivalent long form is ``Query(app).from_("Accounting.Contact")``. Builder
calls only record constraints. Nothing is compiled or sent until execute(),
so a query can be configured in stages and executed more than once.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, List, Optional, Type, Union, TYPE_CHECKING
import logging

from ..runtime.errors import NotPageableError, QueryError
from .collection import Collection
from .model import RemoteModel
from .request import Request
from .url import URL

if TYPE_CHECKING:
    from ..application import Application

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Query:
    """Fluent builder for a GET against one model's endpoint."""

    ORDER_ASC = "ASC"
    ORDER_DESC = "DESC"

    def __init__(self, app: "Application"):
        self._app = app
        self._from_class: Optional[Type[RemoteModel]] = None
        self._where: List[str] = []
        self._order: Optional[str] = None
        self._modified_after: Optional[str] = None
        self._page: Optional[int] = None
        self._offset: Optional[int] = None

    def from_(self, model: Union[str, Type[RemoteModel]]) -> "Query":
        """
        Set the model class to query.

        Raises:
            UnknownTypeError: If the application does not know the model
        """
        self._from_class = self._app.validate_model_class(model)
        return self

    def where(self, *args: Any) -> "Query":
        """
        Add to the where clause of this query.

        With one argument the expression is added as-is, eg.
        ``query.where('Total>=1000')``. With two arguments,
        ``query.where('Name', 'Foo Bar')`` is the same as
        ``query.where('Name=="Foo Bar"')``.

        Repeated calls are combined with AND. The API's filter language reads
        single-quoted text as a character literal, so string values must be
        double-quoted.
        """
        if len(args) == 2:
            self._where.append('%s=="%s"' % (args[0], args[1]))
        elif len(args) == 1:
            self._where.append(args[0])
        else:
            raise TypeError(f"where() takes 1 or 2 arguments ({len(args)} given)")
        return self

    def get_where(self) -> str:
        return " AND ".join(self._where)

    def order_by(self, field: str, direction: str = ORDER_ASC) -> "Query":
        """Order by a particular field, ascending by default. Once per query."""
        self._order = f"{field} {direction}"
        return self

    def get_order(self) -> Optional[str]:
        return self._order

    def modified_after(self, modified_after: Optional[datetime] = None) -> "Query":
        """
        Only return objects modified after a certain time.

        Without a timestamp the epoch is used, so the header is still sent
        but matches everything. Timestamps keep the offset they were given
        with; naive values are read as local time.
        """
        if modified_after is None:
            modified_after = EPOCH
        elif modified_after.tzinfo is None:
            modified_after = modified_after.astimezone()

        self._modified_after = modified_after.replace(microsecond=0).isoformat()
        return self

    def get_modified_after(self) -> Optional[str]:
        return self._modified_after

    def page(self, page: int = 1) -> "Query":
        """
        Return a page of results, for endpoints that support paging.

        Raises:
            NotPageableError: If the model's endpoint does not page
        """
        from_class = self._require_from()
        if not from_class.is_pageable():
            raise NotPageableError(from_class.__name__)

        self._page = int(page)
        return self

    def get_page(self) -> Optional[int]:
        return self._page

    def offset(self, offset: int = 0) -> "Query":
        self._offset = int(offset)
        return self

    def get_offset(self) -> Optional[int]:
        return self._offset

    def get_from(self) -> Optional[Type[RemoteModel]]:
        return self._from_class

    def _require_from(self) -> Type[RemoteModel]:
        if self._from_class is None:
            raise QueryError("No model class to query; call from_() first")
        return self._from_class

    def build_request(self) -> Request:
        """Compile the current constraints into an unsent GET request."""
        from_class = self._require_from()
        url = URL(self._app, from_class.get_resource_uri(), from_class.get_api_stem())
        request = Request(self._app, url, Request.METHOD_GET)

        where = self.get_where()
        if where:
            request.set_parameter("where", where)

        if self._order is not None:
            request.set_parameter("order", self._order)

        if self._modified_after is not None:
            request.set_header(Request.HEADER_IF_MODIFIED_SINCE, self._modified_after)

        if self._page is not None:
            request.set_parameter("page", self._page)

        if self._offset is not None:
            request.set_parameter("offset", self._offset)

        return request

    def execute(self) -> Collection:
        """
        Run the query.

        Returns:
            Collection of the objects that match the query
        """
        from_class = self._require_from()
        request = self.build_request()
        response = request.send()
        response.raise_for_status()

        elements = Collection()
        for element in response.get_elements():
            built_element = from_class(self._app)
            built_element.from_string_array(element)
            elements.append(built_element)

        logger.debug(f"Query on {from_class.__name__} returned {len(elements)} object(s)")
        return elements

    def first(self) -> Optional[RemoteModel]:
        """Run the query and return the first match, or None."""
        elements = self.execute()
        if len(elements) == 0:
            return None
        return elements[0]


__all__ = ["Query"]
