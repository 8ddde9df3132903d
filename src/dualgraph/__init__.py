from __future__ import annotations

from typing import TYPE_CHECKING

from dualgraph.adjacency import AdjacentsIterator
from dualgraph.exceptions import (
    ConcurrentModificationError,
    GraphError,
    InvalidEdgeHandleError,
    IteratorExhaustedError,
    VertexOutOfRangeError,
)
from dualgraph.graph import NOT_FOUND_WEIGHT, Graph
from dualgraph.traversal import BFSIterator, DFSIterator
from dualgraph.types import Adjacent, Edge, Storage, Vertex

__version__ = "0.1.0-dev"

# Export helpers pull in grandalf and networkx, so they load on first access.

if TYPE_CHECKING:
    from dualgraph.export import render_ascii as render_ascii
    from dualgraph.export import render_dot as render_dot
    from dualgraph.export import to_networkx as to_networkx
    from dualgraph.export import write_dot as write_dot

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "render_ascii": ("dualgraph.export", "render_ascii"),
    "render_dot": ("dualgraph.export", "render_dot"),
    "to_networkx": ("dualgraph.export", "to_networkx"),
    "write_dot": ("dualgraph.export", "write_dot"),
}

__all__ = [
    "NOT_FOUND_WEIGHT",
    "Adjacent",
    "AdjacentsIterator",
    "BFSIterator",
    "ConcurrentModificationError",
    "DFSIterator",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidEdgeHandleError",
    "IteratorExhaustedError",
    "Storage",
    "Vertex",
    "VertexOutOfRangeError",
    "render_ascii",
    "render_dot",
    "to_networkx",
    "write_dot",
]


def __getattr__(name: str) -> object:
    """Lazily import export helpers on first access."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


def __dir__() -> list[str]:
    """List available attributes including lazy imports."""
    return list(globals().keys()) + list(_LAZY_IMPORTS.keys())
