from __future__ import annotations

import logging
import pathlib
import random

import click

from dualgraph import config
from dualgraph import demo as demo_mod
from dualgraph.cli import output as cli_output
from dualgraph.cli.decorators import dualgraph_command
from dualgraph.types import Storage

logger = logging.getLogger(__name__)


@dualgraph_command("demo")
@click.option("--vertices", "-n", type=click.IntRange(min=0), help="Number of vertices")
@click.option("--density", type=click.FloatRange(0, 1), help="Fraction of possible edges")
@click.option("--storage", type=click.Choice([s.value for s in Storage]), help="Storage strategy")
@click.option("--oriented/--undirected", default=None, help="Edge orientation")
@click.option("--seed", type=int, help="Random seed for a reproducible graph")
@click.option("--weighted", is_flag=True, help="Use random weights and label edges")
@click.option(
    "--output", "-o", type=click.Path(path_type=pathlib.Path), help="Write DOT to this file"
)
@click.option("--force", is_flag=True, help="Overwrite an existing output file")
def demo(
    vertices: int | None,
    density: float | None,
    storage: str | None,
    oriented: bool | None,
    seed: int | None,
    weighted: bool,
    output: pathlib.Path | None,
    force: bool,
) -> None:
    """Generate a random graph, paint its non-isolated vertices and emit DOT.

    Unset options come from the `demo` section of the configuration. Pipe the
    output to Graphviz, e.g. `dualgraph demo | dot -Tsvg -o graph.svg`.
    """
    cfg = config.get_merged_config()
    settings = cfg.demo.model_copy(
        update={
            key: value
            for key, value in {
                "vertices": vertices,
                "density": density,
                "storage": Storage(storage) if storage else None,
                "oriented": oriented,
                "seed": seed,
            }.items()
            if value is not None
        }
    )

    rng = random.Random(settings.seed)
    graph = demo_mod.random_graph(
        settings.vertices,
        settings.density,
        oriented=settings.oriented,
        storage=settings.storage,
        rng=rng,
        weighted=weighted,
    )
    logger.debug(f"Demo graph: {graph!r}")

    cli_output.emit_dot(
        graph, output, weighted=weighted or cfg.export.weighted, force=force, style=cfg.export
    )
