"""
Base class for objects returned by the API.

Subclasses declare where they live (resource URI and API stem) and what the
endpoint supports. Field mapping is deliberately loose: a hydrated object
keeps the element record as-is, and list values become Collections that
report back to this object when they shrink.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, Optional, Set, TYPE_CHECKING

from ..config import API_CORE
from .collection import Collection

if TYPE_CHECKING:
    from ..application import Application


class RemoteModel:
    """A domain object backed by one element record."""

    RESOURCE_URI: str = ""
    API_STEM: str = API_CORE
    PAGEABLE: bool = False
    GUID_PROPERTY: Optional[str] = None

    def __init__(self, app: Optional["Application"] = None):
        self._app = app
        self._data: Dict[str, Any] = {}
        self._dirty: Set[str] = set()

    @classmethod
    def get_resource_uri(cls) -> str:
        return cls.RESOURCE_URI

    @classmethod
    def get_api_stem(cls) -> str:
        return cls.API_STEM

    @classmethod
    def is_pageable(cls) -> bool:
        return cls.PAGEABLE

    @classmethod
    def get_guid_property(cls) -> Optional[str]:
        return cls.GUID_PROPERTY

    @property
    def application(self) -> Optional["Application"]:
        return self._app

    def from_string_array(self, record: Dict[str, Any]) -> None:
        """
        Populate this object from one element record.

        List values are wrapped in a Collection that has this object
        registered as its owner under the field name.
        """
        for name, value in record.items():
            if isinstance(value, list):
                collection = Collection(value)
                collection.add_associated_object(name, self)
                value = collection
            self._data[name] = value

    def to_string_array(self) -> Dict[str, Any]:
        """The current record, with collections turned back into lists."""
        result = {}
        for name, value in self._data.items():
            if isinstance(value, Collection):
                value = list(value)
            result[name] = value
        return result

    def get_guid(self) -> Optional[str]:
        if self.GUID_PROPERTY is None:
            return None
        return self._data.get(self.GUID_PROPERTY)

    def set_dirty(self, name: str) -> None:
        """Record that relationship ``name`` must be re-submitted on save."""
        self._dirty.add(name)

    def is_dirty(self, name: Optional[str] = None) -> bool:
        if name is None:
            return bool(self._dirty)
        return name in self._dirty

    def get_dirty(self) -> Set[str]:
        return set(self._dirty)

    def clear_dirty(self) -> None:
        self._dirty.clear()

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._data[name] = value
        self.set_dirty(name)

    def __contains__(self, name: str) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        guid = self.get_guid()
        if guid:
            return f"{type(self).__name__}({guid!r})"
        return f"{type(self).__name__}()"


__all__ = ["RemoteModel"]
