from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from dualgraph.graph import Graph


def to_networkx(graph: Graph) -> nx.Graph[int]:
    """Copy graph into a NetworkX graph.

    Oriented graphs become ``nx.DiGraph``, undirected ones ``nx.Graph``. Nodes
    carry ``painted``; edges carry ``weight`` (the currently stored weight) and
    ``painted``. Repeated edge records collapse into a single NetworkX edge.
    """
    result: nx.Graph[int] = nx.DiGraph() if graph.is_oriented_graph() else nx.Graph()

    for vertex in range(graph.get_nodes_count()):
        result.add_node(vertex, painted=graph.painted_node(vertex))

    for edge in graph.get_edges():
        painted = edge.painted
        if result.has_edge(edge.source, edge.target):
            painted = painted or result.edges[edge.source, edge.target]["painted"]
        result.add_edge(
            edge.source,
            edge.target,
            weight=graph.get_edge_weight(edge.source, edge.target),
            painted=painted,
        )

    return result
