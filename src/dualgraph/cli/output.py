from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from dualgraph import export

if TYPE_CHECKING:
    import pathlib

    from dualgraph.config import models
    from dualgraph.graph import Graph

logger = logging.getLogger(__name__)


def emit_dot(
    graph: Graph,
    output: pathlib.Path | None,
    *,
    weighted: bool,
    force: bool,
    style: models.ExportConfig,
) -> None:
    """Print DOT to stdout, or write it to ``output`` with overwrite protection."""
    if output is None:
        click.echo(export.render_dot(graph, weighted=weighted, style=style))
        return

    written = export.write_dot(graph, output, weighted=weighted, override=force, style=style)
    logger.info(f"Wrote {written}")
