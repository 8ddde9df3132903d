"""Adjacency storage strategies.

A Graph holds exactly one AdjacencyStorage, chosen at construction. The two
implementations answer the same questions (is there an arc, what is its
weight, who are the neighbors) over different layouts:

- MatrixStorage: dense n x n grid, ``None`` marks a missing arc.
- ListStorage: one list of (neighbor, weight) pairs per vertex.

Storage only knows about directed arcs. Mirroring for undirected graphs,
the edge list and vertex metadata belong to the Graph.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, override

from dualgraph import adjacency
from dualgraph.types import Adjacent, Storage

if TYPE_CHECKING:
    from dualgraph.adjacency import AdjacentsIterator

__all__ = [
    "AdjacencyStorage",
    "MatrixStorage",
    "ListStorage",
    "make_storage",
]


class AdjacencyStorage(abc.ABC):
    """Directed arc store addressed by dense vertex ids.

    ``version`` increases on every structural change; iterators compare it
    against the value seen at creation to detect mutation mid-iteration.
    Callers are expected to validate vertex ids before calling in.
    """

    kind: Storage
    version: int

    def __init__(self) -> None:
        self.version = 0

    @abc.abstractmethod
    def __len__(self) -> int:
        """Number of vertices the store is sized for."""

    @abc.abstractmethod
    def insert(self, source: int, target: int, weight: float) -> bool:
        """Record the arc source -> target.

        Returns True when the call should produce a new edge record.
        """

    @abc.abstractmethod
    def weight(self, source: int, target: int) -> float | None:
        """Weight of source -> target, or None if there is no such arc."""

    @abc.abstractmethod
    def adjacents(self, vertex: int) -> AdjacentsIterator:
        """Cursor over the neighbors of ``vertex``."""

    @abc.abstractmethod
    def add_vertex(self) -> None:
        """Grow the store by one vertex with no arcs."""

    def adjacent(self, source: int, target: int) -> bool:
        return self.weight(source, target) is not None

    def _touch(self) -> None:
        self.version += 1


class MatrixStorage(AdjacencyStorage):
    """Dense weight grid with O(1) arc lookup.

    Each row also tracks its smallest occupied column so adjacency iteration
    can start there instead of scanning from zero.
    """

    kind = Storage.MATRIX

    _rows: list[list[float | None]]
    _first_neighbor: list[int | None]

    def __init__(self, vertex_count: int) -> None:
        super().__init__()
        self._rows = [[None] * vertex_count for _ in range(vertex_count)]
        self._first_neighbor = [None] * vertex_count

    @override
    def __len__(self) -> int:
        return len(self._rows)

    @override
    def insert(self, source: int, target: int, weight: float) -> bool:
        row = self._rows[source]
        is_new = row[target] is None
        row[target] = weight

        first = self._first_neighbor[source]
        if first is None or target < first:
            self._first_neighbor[source] = target

        self._touch()
        return is_new

    @override
    def weight(self, source: int, target: int) -> float | None:
        return self._rows[source][target]

    @override
    def adjacents(self, vertex: int) -> AdjacentsIterator:
        return adjacency.MatrixAdjacentsIterator(
            self, self._rows[vertex], self._first_neighbor[vertex]
        )

    @override
    def add_vertex(self) -> None:
        for row in self._rows:
            row.append(None)
        self._rows.append([None] * (len(self._rows) + 1))
        self._first_neighbor.append(None)
        self._touch()

    def first_neighbor(self, vertex: int) -> int | None:
        """Smallest neighbor id of ``vertex``, or None if it has no arcs."""
        return self._first_neighbor[vertex]


class ListStorage(AdjacencyStorage):
    """Per-vertex neighbor lists in insertion order.

    Inserts never deduplicate: applying the same arc twice stores it twice.
    """

    kind = Storage.LIST

    _lists: list[list[Adjacent]]

    def __init__(self, vertex_count: int) -> None:
        super().__init__()
        self._lists = [[] for _ in range(vertex_count)]

    @override
    def __len__(self) -> int:
        return len(self._lists)

    @override
    def insert(self, source: int, target: int, weight: float) -> bool:
        self._lists[source].append(Adjacent(target, weight))
        self._touch()
        return True

    @override
    def weight(self, source: int, target: int) -> float | None:
        for neighbor, weight in self._lists[source]:
            if neighbor == target:
                return weight
        return None

    @override
    def adjacents(self, vertex: int) -> AdjacentsIterator:
        return adjacency.ListAdjacentsIterator(self, self._lists[vertex])

    @override
    def add_vertex(self) -> None:
        self._lists.append([])
        self._touch()


def make_storage(kind: Storage | str, vertex_count: int) -> AdjacencyStorage:
    """Build the storage strategy named by ``kind``."""
    match Storage(kind):
        case Storage.MATRIX:
            return MatrixStorage(vertex_count)
        case Storage.LIST:
            return ListStorage(vertex_count)
