from __future__ import annotations

from dualgraph.graph import Graph
from dualgraph.types import Storage

# Directed 9-vertex graph used by the traversal scenarios.
SCENARIO_EDGES: list[tuple[int, int]] = [
    (0, 1),
    (0, 2),
    (2, 3),
    (2, 4),
    (3, 5),
    (3, 6),
    (3, 7),
    (4, 7),
    (4, 8),
    (6, 8),
]

SCENARIO_YAML = """\
vertices: 9
oriented: true
edges:
  - [0, 1]
  - [0, 2]
  - [2, 3]
  - [2, 4]
  - [3, 5]
  - [3, 6]
  - [3, 7]
  - [4, 7]
  - [4, 8]
  - [6, 8]
"""


def build_scenario_graph(storage: Storage | str) -> Graph:
    """Build the 9-vertex directed scenario graph."""
    graph = Graph(9, oriented=True, storage=storage)
    for source, target in SCENARIO_EDGES:
        graph.apply_edge(source, target)
    return graph


def neighbors(graph: Graph, vertex: int) -> list[int]:
    """Neighbor ids of vertex in adjacency iteration order."""
    return [adjacent.vertex for adjacent in graph.adjacents_of(vertex)]
