"""Random graph generation for demos and stress runs.

All randomness comes from the ``random.Random`` passed in, never from the
module-level generator, so a seed reproduces the same graph.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dualgraph.graph import Graph

if TYPE_CHECKING:
    import random

    from dualgraph.types import Storage

logger = logging.getLogger(__name__)

__all__ = ["candidate_pairs", "random_graph", "complete_graph_pairs"]


def candidate_pairs(vertices: int, oriented: bool) -> list[tuple[int, int]]:
    """Every pair of distinct vertices, one direction only when undirected."""
    return [
        (source, target)
        for source in range(vertices)
        for target in range(vertices)
        if source != target and (oriented or source < target)
    ]


def complete_graph_pairs(vertices: int) -> list[tuple[int, int]]:
    """Ordered pairs of a complete directed graph."""
    return candidate_pairs(vertices, oriented=True)


def random_graph(
    vertices: int,
    density: float,
    *,
    oriented: bool,
    storage: Storage | str,
    rng: random.Random,
    weighted: bool = False,
) -> Graph:
    """Build a graph with about ``density`` of the n*(n-1) possible edges.

    Every vertex that gains an edge is painted, so the rendered output
    highlights the connected part of the graph.
    """
    graph = Graph(vertices, oriented=oriented, storage=storage)
    pairs = candidate_pairs(vertices, oriented)
    count = min(int(vertices * (vertices - 1) * density), len(pairs))

    for source, target in rng.sample(pairs, count):
        weight = round(rng.uniform(0, 100), 2) if weighted else 1.0
        graph.apply_edge(source, target, weight)
        graph.paint_node(source)
        graph.paint_node(target)

    logger.debug(f"Generated {graph!r} (density={density})")
    return graph
