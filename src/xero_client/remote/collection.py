"""
A list-like container for collections of objects, such as the line items on
an invoice.

A collection can be the value of a relationship on one or more owning objects.
Whenever its membership shrinks, every registered owner is told that the
relationship is dirty so it gets re-submitted on the next save. Owners are
held through weak references: the collection never keeps an owner alive.
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any, Dict, Iterable, List, Optional
import weakref


class Collection(MutableSequence):
    """Ordered, indexable result set with dirty propagation to its owners."""

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: List[Any] = list(items) if items is not None else []
        self._associated_objects: Dict[str, weakref.ref] = {}

    def add_associated_object(self, parent_property: str, owner: Any) -> None:
        """
        Register an owner holding this collection under ``parent_property``.

        Registering the same property name again replaces the previous owner.
        """
        self._associated_objects[parent_property] = weakref.ref(owner)

    def get_associated_objects(self) -> Dict[str, Any]:
        """Live owners keyed by the relationship they hold this collection under."""
        owners = {}
        for parent_property, ref in self._associated_objects.items():
            owner = ref()
            if owner is not None:
                owners[parent_property] = owner
        return owners

    def _mark_owners_dirty(self) -> None:
        for parent_property, owner in self.get_associated_objects().items():
            owner.set_dirty(parent_property)

    def _has_index(self, index: Any) -> bool:
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return -len(self._items) <= index < len(self._items)

    def remove_at(self, index: int) -> None:
        """
        Remove the item at ``index``; absent indexes are ignored.

        Negative indexes count from the end as they do for lists, so
        ``remove_at(-1)`` removes the last item. Only positions outside
        ``-len(self)`` to ``len(self) - 1`` and non-int keys are absent.
        """
        if not self._has_index(index):
            return
        self._mark_owners_dirty()
        del self._items[index]

    def remove(self, value: Any) -> None:
        """Remove every occurrence of this exact object (identity, not equality)."""
        matches = [index for index, item in enumerate(self._items) if item is value]
        # Highest first so earlier positions stay valid
        for index in reversed(matches):
            self.remove_at(index)

    def remove_all(self) -> None:
        """Remove all of the values in the collection."""
        self._mark_owners_dirty()
        self._items = []

    def clear(self) -> None:
        self.remove_all()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Collection(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            value = list(value)
            if len(value) < len(self._items[index]):
                self._mark_owners_dirty()
        self._items[index] = value

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            if not self._items[index]:
                return
            self._mark_owners_dirty()
            del self._items[index]
            return
        if not self._has_index(index):
            raise IndexError("collection index out of range")
        self.remove_at(index)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"


__all__ = ["Collection"]
