from __future__ import annotations

import networkx as nx

from dualgraph.export import to_networkx
from dualgraph.graph import Graph
from dualgraph.types import Storage


def test_oriented_graph_becomes_digraph(storage: Storage) -> None:
    g = Graph(3, oriented=True, storage=storage)
    g.apply_edge(0, 1, 2.5)
    g.paint_node(2)

    result = to_networkx(g)

    assert isinstance(result, nx.DiGraph)
    assert sorted(result.nodes) == [0, 1, 2]
    assert result.has_edge(0, 1)
    assert not result.has_edge(1, 0)
    assert result.edges[0, 1]["weight"] == 2.5
    assert result.nodes[2]["painted"] is True
    assert result.nodes[0]["painted"] is False


def test_undirected_graph_becomes_graph(storage: Storage) -> None:
    g = Graph(3, oriented=False, storage=storage)
    g.apply_edge(2, 0)

    result = to_networkx(g)

    assert not result.is_directed()
    assert result.has_edge(0, 2)
    assert result.number_of_edges() == 1


def test_repeated_list_records_collapse() -> None:
    g = Graph(2, oriented=True, storage=Storage.LIST)
    g.apply_edge(0, 1, 1.0)
    g.apply_edge(0, 1, 3.0)
    g.paint_edge(g.get_edges()[0])

    result = to_networkx(g)

    assert result.number_of_edges() == 1
    assert result.edges[0, 1]["painted"] is True
    assert result.edges[0, 1]["weight"] == 1.0


def test_weight_follows_stored_value_in_matrix() -> None:
    g = Graph(2, oriented=True, storage=Storage.MATRIX)
    g.apply_edge(0, 1, 1.0)
    g.apply_edge(0, 1, 4.0)

    assert to_networkx(g).edges[0, 1]["weight"] == 4.0
