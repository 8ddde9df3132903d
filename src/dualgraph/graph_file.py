"""YAML graph descriptions.

A graph file lists the vertex count, orientation, storage strategy, edges and
painted vertices::

    vertices: 4
    oriented: true
    storage: list
    edges:
      - [0, 1]
      - [1, 2, 2.5]
      - {from: 2, to: 3, weight: 0.5, painted: true}
    painted: [0]

``oriented`` and ``storage`` fall back to the ``graph`` section of the
configuration when omitted.
"""

import logging
import pathlib
from typing import Annotated, Any

import pydantic
import ruamel.yaml

from dualgraph import exceptions
from dualgraph.config import models
from dualgraph.graph import Graph
from dualgraph.types import Edge, Storage

logger = logging.getLogger(__name__)

__all__ = ["EdgeEntry", "GraphFile", "build_graph", "load_graph_file", "parse_graph_file"]


class EdgeEntry(pydantic.BaseModel):
    """One edge, written as ``[from, to]``, ``[from, to, weight]`` or a mapping."""

    model_config = pydantic.ConfigDict(populate_by_name=True, extra="forbid")

    source: Annotated[int, pydantic.Field(alias="from", ge=0)]
    target: Annotated[int, pydantic.Field(alias="to", ge=0)]
    weight: float = 1.0
    painted: bool = False

    @pydantic.model_validator(mode="before")
    @classmethod
    def parse_sequence(cls, v: Any) -> Any:
        """Accept the short list form."""
        if isinstance(v, (list, tuple)):
            if len(v) not in (2, 3):
                raise ValueError(f"edge must be [from, to] or [from, to, weight], got {v!r}")
            entry = {"from": v[0], "to": v[1]}
            if len(v) == 3:
                entry["weight"] = v[2]
            return entry
        return v


class GraphFile(pydantic.BaseModel):
    """Validated contents of a graph file."""

    model_config = pydantic.ConfigDict(extra="forbid")

    vertices: Annotated[int, pydantic.Field(ge=0)]
    oriented: bool | None = None
    storage: Storage | None = None
    edges: list[EdgeEntry] = pydantic.Field(default_factory=list)
    painted: list[Annotated[int, pydantic.Field(ge=0)]] = pydantic.Field(default_factory=list)


def parse_graph_file(path: pathlib.Path) -> GraphFile:
    """Read and validate a graph file."""
    try:
        yaml = ruamel.yaml.YAML(typ="safe")
        with path.open() as f:
            data = yaml.load(f)
    except ruamel.yaml.YAMLError as e:
        raise exceptions.GraphFileError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise exceptions.GraphFileError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise exceptions.GraphFileError(
            f"Graph file {path} must be a mapping, got {type(data).__name__}"
        )

    try:
        return GraphFile.model_validate(data)
    except pydantic.ValidationError as e:
        raise exceptions.GraphFileError(f"Invalid graph file {path}: {e}") from e


def build_graph(description: GraphFile, defaults: models.GraphDefaults | None = None) -> Graph:
    """Construct a Graph from a validated graph file.

    Raises:
        GraphFileError: If an edge or painted vertex is out of range.
    """
    defaults = defaults or models.GraphDefaults()
    oriented = description.oriented if description.oriented is not None else defaults.oriented
    storage = description.storage if description.storage is not None else defaults.storage
    graph = Graph(description.vertices, oriented=oriented, storage=storage)

    try:
        for entry in description.edges:
            edge = graph.apply_edge(entry.source, entry.target, entry.weight)
            if entry.painted:
                graph.paint_edge(edge or _find_edge(graph, entry.source, entry.target))
        for vertex in description.painted:
            graph.paint_node(vertex)
    except exceptions.VertexOutOfRangeError as e:
        raise exceptions.GraphFileError(str(e)) from e

    logger.debug(f"Built {graph!r} from graph file")
    return graph


def load_graph_file(
    path: pathlib.Path | str, defaults: models.GraphDefaults | None = None
) -> Graph:
    """Read, validate and build the graph described by ``path``."""
    return build_graph(parse_graph_file(pathlib.Path(path)), defaults)


def _find_edge(graph: Graph, source: int, target: int) -> Edge | None:
    """Existing record for a pair; undirected graphs match either direction."""
    for edge in graph.get_edges():
        if (edge.source, edge.target) == (source, target):
            return edge
        if not graph.is_oriented_graph() and (edge.source, edge.target) == (target, source):
            return edge
    return None
