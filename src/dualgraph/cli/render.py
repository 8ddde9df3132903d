from __future__ import annotations

import pathlib

import click

from dualgraph import config, export, graph_file
from dualgraph.cli import output as cli_output
from dualgraph.cli.decorators import dualgraph_command


@dualgraph_command("render")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["dot", "ascii"]),
    default="dot",
    help="Output format",
)
@click.option("--weighted/--unweighted", default=None, help="Label edges with weights")
@click.option(
    "--output", "-o", type=click.Path(path_type=pathlib.Path), help="Write DOT to this file"
)
@click.option("--force", is_flag=True, help="Overwrite an existing output file")
def render(
    path: pathlib.Path,
    output_format: str,
    weighted: bool | None,
    output: pathlib.Path | None,
    force: bool,
) -> None:
    """Render the graph described by the YAML file PATH.

    DOT output lists every edge with its paint state; isolated vertices are
    emitted as invisible self-loops. ASCII output draws boxes and lines for
    terminals without Graphviz.
    """
    cfg = config.get_merged_config()
    graph = graph_file.load_graph_file(path, cfg.graph)

    match output_format:
        case "ascii":
            if output is not None:
                raise click.UsageError("--output is only supported with --format dot")
            click.echo(export.render_ascii(graph))
        case _:
            cli_output.emit_dot(
                graph,
                output,
                weighted=cfg.export.weighted if weighted is None else weighted,
                force=force,
                style=cfg.export,
            )
