from __future__ import annotations

import contextlib
import logging
import os
import pathlib
import tempfile
from typing import TYPE_CHECKING

from dualgraph import exceptions, metrics
from dualgraph.config import models
from dualgraph.export import render

if TYPE_CHECKING:
    from dualgraph.graph import Graph

logger = logging.getLogger(__name__)


def with_extension(path: pathlib.Path, extension: str) -> pathlib.Path:
    """Append ``.extension`` to path unless it already ends with it."""
    suffix = f".{extension}"
    if path.suffix == suffix:
        return path
    return path.with_name(path.name + suffix)


def write_dot(
    graph: Graph,
    path: pathlib.Path | str,
    *,
    weighted: bool = False,
    override: bool = False,
    style: models.ExportConfig | None = None,
) -> pathlib.Path:
    """Write the DOT rendering of graph to path.

    The configured extension is appended when missing. An existing target is
    left untouched unless override is True.

    Returns:
        The path actually written.

    Raises:
        ExportTargetExistsError: Target exists and override is False.
        ExportError: Target could not be written.
    """
    style = style or models.ExportConfig()
    target = with_extension(pathlib.Path(path), style.extension)

    if target.exists() and not override:
        raise exceptions.ExportTargetExistsError(str(target))

    content = render.render_dot(graph, weighted=weighted, style=style)

    with metrics.timed("export.write_dot"):
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w") as f:
                    f.write(content)
                    f.write("\n")
                os.replace(tmp_path, target)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_path)
                raise
        except PermissionError:
            raise exceptions.ExportError(f"Permission denied writing {target}") from None
        except OSError as e:
            raise exceptions.ExportError(f"Error writing {target}: {e}") from e

    logger.debug(f"Wrote DOT export to {target}")
    return target
