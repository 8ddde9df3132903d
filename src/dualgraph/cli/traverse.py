from __future__ import annotations

import logging
import pathlib

import click

from dualgraph import config, graph_file, traversal
from dualgraph.cli.decorators import dualgraph_command

logger = logging.getLogger(__name__)

_ITERATORS = {
    "dfs": traversal.DFSIterator,
    "bfs": traversal.BFSIterator,
}


@dualgraph_command("traverse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path))
@click.option(
    "--order", type=click.Choice(sorted(_ITERATORS)), default="dfs", help="Traversal order"
)
@click.option("--source", "-s", type=click.IntRange(min=0), default=0, help="Start vertex")
@click.option("--fill", "fill_graph", is_flag=True, help="Complete the graph before traversing")
def traverse(path: pathlib.Path, order: str, source: int, fill_graph: bool) -> None:
    """Print the vertices reachable from SOURCE in DFS or BFS order.

    PATH is a YAML graph file. Only vertices reachable from the source are
    printed, space-separated, in visit order.
    """
    graph = graph_file.load_graph_file(path, config.get_merged_config().graph)
    if fill_graph:
        added = graph.fill()
        logger.debug(f"fill() added {added} edges")

    visited = list(_ITERATORS[order](source, graph))
    unreachable = graph.get_nodes_count() - len(visited)
    if unreachable:
        logger.debug(f"{unreachable} vertices unreachable from {source}")

    click.echo(" ".join(str(v) for v in visited))
