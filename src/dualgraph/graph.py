"""Graph container over interchangeable adjacency storage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dualgraph import exceptions, metrics
from dualgraph import storage as graph_storage
from dualgraph.types import Edge, Storage, Vertex

if TYPE_CHECKING:
    from dualgraph.adjacency import AdjacentsIterator

logger = logging.getLogger(__name__)

__all__ = ["Graph", "NOT_FOUND_WEIGHT"]

# Returned by get_edge_weight() for a missing arc unless the caller asks otherwise.
NOT_FOUND_WEIGHT = -1.0


class Graph:
    """Weighted graph with vertices 0..n-1 and a fixed storage strategy.

    Args:
        vertex_count: Number of vertices to create up front.
        oriented: True for a directed graph. Undirected graphs store every
            edge in both directions but keep a single edge record.
        storage: Storage.MATRIX (dense, O(1) adjacency test, neighbors in
            ascending id order) or Storage.LIST (sparse, O(degree) adjacency
            test, neighbors in insertion order).

    Example:
        >>> g = Graph(3, oriented=True, storage=Storage.LIST)
        >>> _ = g.apply_edge(0, 2, 1.5)
        >>> g.are_adjacent(0, 2), g.are_adjacent(2, 0)
        (True, False)
        >>> g.get_edge_weight(0, 2)
        1.5
    """

    _oriented: bool
    _storage: graph_storage.AdjacencyStorage
    _vertices: list[Vertex]
    _edges: list[Edge]

    def __init__(
        self,
        vertex_count: int = 0,
        oriented: bool = False,
        storage: Storage | str = Storage.MATRIX,
    ) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self._oriented = oriented
        self._storage = graph_storage.make_storage(storage, vertex_count)
        self._vertices = [Vertex() for _ in range(vertex_count)]
        self._edges = []

    def __repr__(self) -> str:
        kind = "oriented" if self._oriented else "undirected"
        return (
            f"Graph({len(self._vertices)} vertices, {len(self._edges)} edges, "
            + f"{kind}, {self._storage.kind})"
        )

    def __len__(self) -> int:
        return len(self._vertices)

    # --- structure ---

    def apply_edge(self, source: int, target: int, weight: float = 1.0) -> Edge | None:
        """Add or overwrite the edge source -> target.

        Undirected graphs also record target -> source with the same weight.

        The edge list grows differently per storage strategy. Matrix storage
        appends a record only the first time an ordered pair is applied, and
        later calls just overwrite the stored weight. List storage appends a
        record (and a neighbor entry) on every call. Degrees are updated on
        every call in both cases.

        Returns:
            The new edge record, or None when matrix storage already had one.

        Raises:
            VertexOutOfRangeError: If either endpoint does not exist. Nothing
                is modified in that case.
        """
        self._check_vertex(source)
        self._check_vertex(target)

        is_new = self._storage.insert(source, target, weight)
        if not self._oriented:
            self._storage.insert(target, source, weight)

        edge = None
        if is_new:
            edge = Edge(source, target, weight)
            self._edges.append(edge)

        src_vertex = self._vertices[source]
        dst_vertex = self._vertices[target]
        src_vertex.isolated = False
        dst_vertex.isolated = False
        src_vertex.out_degree += 1
        dst_vertex.in_degree += 1
        if not self._oriented:
            dst_vertex.out_degree += 1
            src_vertex.in_degree += 1

        logger.debug(f"Applied edge {source}->{target} (weight={weight}, new={is_new})")
        return edge

    def add_vertex(self) -> int:
        """Append an isolated vertex and return the new vertex count."""
        self._vertices.append(Vertex())
        self._storage.add_vertex()
        return len(self._vertices)

    def fill(self, weight: float = 1.0) -> int:
        """Turn the graph into a complete graph.

        Every ordered pair of distinct vertices that is not adjacent gets an
        edge, visiting pairs in ascending (source, target) order. For an
        undirected graph the mirrored arc makes the reverse pair adjacent, so
        each unordered pair is filled once.

        Returns:
            Number of edges applied.
        """
        applied = 0
        with metrics.timed("graph.fill"):
            count = len(self._vertices)
            for source in range(count):
                for target in range(count):
                    if source == target or self._storage.adjacent(source, target):
                        continue
                    self.apply_edge(source, target, weight)
                    applied += 1
        logger.debug(f"Filled graph with {applied} edges")
        return applied

    # --- queries ---

    def are_adjacent(self, v1: int, v2: int) -> bool:
        """Return True if there is an arc v1 -> v2."""
        self._check_vertex(v1)
        self._check_vertex(v2)
        return self._storage.adjacent(v1, v2)

    def get_edge_weight[T](
        self, v1: int, v2: int, default: float | T = NOT_FOUND_WEIGHT
    ) -> float | T:
        """Return the weight of v1 -> v2, or ``default`` if they are not adjacent.

        With list storage and repeated edges, the first stored weight wins.
        """
        self._check_vertex(v1)
        self._check_vertex(v2)
        weight = self._storage.weight(v1, v2)
        return default if weight is None else weight

    def adjacents_of(self, vertex: int) -> AdjacentsIterator:
        """Return a cursor over the neighbors of ``vertex``.

        Matrix storage yields neighbors in ascending id order, list storage in
        insertion order.
        """
        self._check_vertex(vertex)
        return self._storage.adjacents(vertex)

    def is_oriented_graph(self) -> bool:
        return self._oriented

    def get_nodes_count(self) -> int:
        return len(self._vertices)

    def get_edges_count(self) -> int:
        return len(self._edges)

    def get_edges(self) -> list[Edge]:
        """Return the live edge list (not a copy)."""
        return self._edges

    def is_isolated_node(self, vertex: int) -> bool:
        return self.vertex(vertex).isolated

    def in_degree(self, vertex: int) -> int:
        return self.vertex(vertex).in_degree

    def out_degree(self, vertex: int) -> int:
        return self.vertex(vertex).out_degree

    def vertex(self, vertex: int) -> Vertex:
        """Return the metadata record for ``vertex``."""
        self._check_vertex(vertex)
        return self._vertices[vertex]

    @property
    def storage_kind(self) -> Storage:
        return self._storage.kind

    @property
    def version(self) -> int:
        """Structural modification counter, bumped by apply_edge/add_vertex."""
        return self._storage.version

    # --- painting ---

    def paint_node(self, vertex: int) -> None:
        self.vertex(vertex).painted = True

    def unpaint_node(self, vertex: int) -> None:
        self.vertex(vertex).painted = False

    def painted_node(self, vertex: int) -> bool:
        return self.vertex(vertex).painted

    def paint_edge(self, edge: Edge | None) -> None:
        _check_edge(edge).painted = True

    def unpaint_edge(self, edge: Edge | None) -> None:
        _check_edge(edge).painted = False

    def painted_edge(self, edge: Edge | None) -> bool:
        return _check_edge(edge).painted

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._vertices):
            raise exceptions.VertexOutOfRangeError(vertex, len(self._vertices))


def _check_edge(edge: Edge | None) -> Edge:
    if not isinstance(edge, Edge):
        raise exceptions.InvalidEdgeHandleError(
            f"Expected an Edge from get_edges(), got {type(edge).__name__}"
        )
    return edge
