"""Storage-agnostic cursors over one vertex's neighbors."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Self, override

from dualgraph import exceptions
from dualgraph.types import Adjacent

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dualgraph.storage import AdjacencyStorage

__all__ = [
    "AdjacentsIterator",
    "MatrixAdjacentsIterator",
    "ListAdjacentsIterator",
]


class AdjacentsIterator(abc.ABC):
    """Cursor over the (neighbor, weight) pairs of a single vertex.

    Drive it explicitly with there_is_more() / next() / advance(), or use it as
    a regular Python iterator. Both styles consume the same cursor.

    Raises ConcurrentModificationError if the owning storage changes structure
    while the cursor is in use.
    """

    _storage: AdjacencyStorage
    _version: int

    def __init__(self, storage: AdjacencyStorage) -> None:
        self._storage = storage
        self._version = storage.version

    @abc.abstractmethod
    def there_is_more(self) -> bool:
        """Return True if an unread neighbor remains."""

    @abc.abstractmethod
    def _current(self) -> Adjacent: ...

    @abc.abstractmethod
    def _step(self) -> None: ...

    def next(self) -> Adjacent:
        """Return the neighbor under the cursor without moving it."""
        self._ensure_readable()
        return self._current()

    def advance(self) -> None:
        """Move the cursor to the next neighbor."""
        self._ensure_readable()
        self._step()

    def _ensure_readable(self) -> None:
        if self._storage.version != self._version:
            raise exceptions.ConcurrentModificationError(
                "Graph structure changed while iterating adjacents"
            )
        if not self.there_is_more():
            raise exceptions.IteratorExhaustedError("No more adjacents")

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Adjacent:
        if not self.there_is_more():
            raise StopIteration
        adjacent = self.next()
        self._step()
        return adjacent


class MatrixAdjacentsIterator(AdjacentsIterator):
    """Walks one row of an adjacency matrix in ascending neighbor order.

    The cursor starts at the row's first-neighbor hint and each step scans
    forward past empty cells, so the cost of a step is the gap to the next
    neighbor rather than a full rescan.
    """

    _row: Sequence[float | None]
    _end: int
    _cursor: int

    def __init__(
        self,
        storage: AdjacencyStorage,
        row: Sequence[float | None],
        first_neighbor: int | None,
    ) -> None:
        super().__init__(storage)
        self._row = row
        self._end = len(row)
        self._cursor = first_neighbor if first_neighbor is not None else self._end

    @override
    def there_is_more(self) -> bool:
        return self._cursor < self._end

    @override
    def _current(self) -> Adjacent:
        weight = self._row[self._cursor]
        assert weight is not None, "cursor must rest on a stored weight"
        return Adjacent(self._cursor, weight)

    @override
    def _step(self) -> None:
        self._cursor += 1
        while self._cursor < self._end and self._row[self._cursor] is None:
            self._cursor += 1


class ListAdjacentsIterator(AdjacentsIterator):
    """Walks a copy of an adjacency list in insertion order."""

    _adjacents: tuple[Adjacent, ...]
    _cursor: int

    def __init__(self, storage: AdjacencyStorage, adjacents: Iterable[Adjacent]) -> None:
        super().__init__(storage)
        self._adjacents = tuple(adjacents)
        self._cursor = 0

    @override
    def there_is_more(self) -> bool:
        return self._cursor < len(self._adjacents)

    @override
    def _current(self) -> Adjacent:
        return self._adjacents[self._cursor]

    @override
    def _step(self) -> None:
        self._cursor += 1
