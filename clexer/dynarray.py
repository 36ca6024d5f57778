"""A growable array with an explicit capacity that grows by half when full."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import Any

_log = logging.getLogger(__name__)


class DynArray:
    """Sequence whose capacity grows to 1.5 times its length when it fills up."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of items the array can hold before it grows."""
        return self._capacity

    def _grow(self) -> None:
        length = len(self._items)
        self._capacity = max(math.ceil(length * 3 / 2), length + 1)
        _log.debug("resized to capacity %d", self._capacity)

    def push(self, item: Any) -> None:
        """Append an item, growing the capacity first if the array is full."""
        if len(self._items) == self._capacity:
            self._grow()
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the last item; the capacity is left unchanged."""
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r}, capacity={self._capacity})"