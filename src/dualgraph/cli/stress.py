from __future__ import annotations

import logging
import random

import click

from dualgraph import demo, metrics, traversal
from dualgraph.cli.decorators import dualgraph_command
from dualgraph.graph import Graph
from dualgraph.types import Storage

logger = logging.getLogger(__name__)


def run_stress(vertices: int, storage: Storage, rng: random.Random) -> Graph:
    """Insert a complete directed graph with random weights, then traverse it."""
    pairs = demo.complete_graph_pairs(vertices)
    graph = Graph(vertices, oriented=True, storage=storage)

    with metrics.timed(f"stress.{storage}.apply_edges"):
        for source, target in pairs:
            graph.apply_edge(source, target, rng.random())

    if vertices:
        with metrics.timed(f"stress.{storage}.dfs"):
            for _ in traversal.DFSIterator(0, graph):
                pass
        with metrics.timed(f"stress.{storage}.bfs"):
            for _ in traversal.BFSIterator(0, graph):
                pass

    return graph


@dualgraph_command("stress")
@click.option(
    "--vertices", "-n", type=click.IntRange(min=0), default=300, help="Number of vertices"
)
@click.option(
    "--storage",
    type=click.Choice(["both", *(s.value for s in Storage)]),
    default="both",
    help="Storage strategy to exercise",
)
@click.option("--seed", type=int, help="Random seed for edge weights")
def stress(vertices: int, storage: str, seed: int | None) -> None:
    """Insert every edge of a complete directed graph and traverse it.

    Reports timings per storage strategy. Memory and time grow with the
    square of VERTICES.
    """
    metrics.enable()
    rng = random.Random(seed)
    kinds = list(Storage) if storage == "both" else [Storage(storage)]

    for kind in kinds:
        logger.info(f"stress ({kind}) started...")
        graph = run_stress(vertices, kind, rng)
        click.echo(f"{kind}: {graph.get_edges_count()} edges over {vertices} vertices")
