"""Lazy depth-first and breadth-first traversal over a Graph.

Both iterators share one state machine and differ only in which end of the
frontier they take the next vertex from: DFS uses a stack, BFS a queue. The
vertex reported by next() is always unvisited; it is marked visited when the
caller advances past it.

Visit order follows each vertex's adjacency order, so the same graph built
with matrix storage (ascending ids) and list storage (insertion order) can
be traversed differently.
"""

from __future__ import annotations

import abc
import collections
from typing import TYPE_CHECKING, Self, override

from dualgraph import exceptions

if TYPE_CHECKING:
    from dualgraph.graph import Graph

__all__ = ["DFSIterator", "BFSIterator"]


class _TraversalIterator(abc.ABC):
    _graph: Graph
    _source: int
    _visited: list[bool]
    _version: int

    def __init__(self, source: int, graph: Graph) -> None:
        # Validates source before any state is built
        graph.vertex(source)
        self._graph = graph
        self._source = source
        self._visited = [False] * graph.get_nodes_count()
        self._version = graph.version
        self._push(source)

    @property
    def source(self) -> int:
        return self._source

    @abc.abstractmethod
    def _push(self, vertex: int) -> None: ...

    @abc.abstractmethod
    def _pop(self) -> int: ...

    @abc.abstractmethod
    def _peek(self) -> int: ...

    @abc.abstractmethod
    def _frontier_size(self) -> int: ...

    def there_is_more(self) -> bool:
        """Return True while some reachable vertex has not been emitted."""
        return self._frontier_size() > 0

    def next(self) -> int:
        """Return the vertex being visited without moving on."""
        self._ensure_readable()
        return self._peek()

    def advance(self) -> None:
        """Visit the current vertex and move to the next unvisited one."""
        self._ensure_readable()
        vertex = self._pop()
        self._visited[vertex] = True

        for neighbor, _weight in self._graph.adjacents_of(vertex):
            if not self._visited[neighbor]:
                self._push(neighbor)

        while self._frontier_size() > 0 and self._visited[self._peek()]:
            self._pop()

    def _ensure_readable(self) -> None:
        if self._graph.version != self._version:
            raise exceptions.ConcurrentModificationError(
                "Graph structure changed during traversal"
            )
        if not self.there_is_more():
            raise exceptions.IteratorExhaustedError("Traversal is exhausted")

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        if not self.there_is_more():
            raise StopIteration
        vertex = self.next()
        self.advance()
        return vertex


class DFSIterator(_TraversalIterator):
    """Depth-first traversal from ``source``; the last pushed neighbor is visited first.

    Example:
        >>> from dualgraph import Graph
        >>> g = Graph(4, oriented=True)
        >>> for s, t in [(0, 1), (0, 2), (2, 3)]:
        ...     _ = g.apply_edge(s, t)
        >>> list(DFSIterator(0, g))
        [0, 2, 3, 1]
    """

    _stack: list[int]

    def __init__(self, source: int, graph: Graph) -> None:
        self._stack = []
        super().__init__(source, graph)

    @override
    def _push(self, vertex: int) -> None:
        self._stack.append(vertex)

    @override
    def _pop(self) -> int:
        return self._stack.pop()

    @override
    def _peek(self) -> int:
        return self._stack[-1]

    @override
    def _frontier_size(self) -> int:
        return len(self._stack)


class BFSIterator(_TraversalIterator):
    """Breadth-first traversal from ``source``; neighbors are visited in push order."""

    _queue: collections.deque[int]

    def __init__(self, source: int, graph: Graph) -> None:
        self._queue = collections.deque()
        super().__init__(source, graph)

    @override
    def _push(self, vertex: int) -> None:
        self._queue.append(vertex)

    @override
    def _pop(self) -> int:
        return self._queue.popleft()

    @override
    def _peek(self) -> int:
        return self._queue[0]

    @override
    def _frontier_size(self) -> int:
        return len(self._queue)
