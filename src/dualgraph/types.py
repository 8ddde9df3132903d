from __future__ import annotations

import dataclasses
import enum
from typing import NamedTuple


class Storage(enum.StrEnum):
    """Backing store for a Graph, fixed at construction."""

    MATRIX = "matrix"
    LIST = "list"


class Adjacent(NamedTuple):
    """One neighbor yielded by an AdjacentsIterator."""

    vertex: int
    weight: float


@dataclasses.dataclass(eq=False)
class Edge:
    """Edge record kept in the graph's edge list.

    Only ``painted`` is meant to change after creation. Compared by identity,
    so two records for the same pair stay distinguishable in list storage.
    """

    source: int
    target: int
    weight: float
    painted: bool = False

    def as_tuple(self) -> tuple[int, int, float]:
        return (self.source, self.target, self.weight)


@dataclasses.dataclass
class Vertex:
    """Per-vertex metadata."""

    isolated: bool = True
    painted: bool = False
    in_degree: int = 0
    out_degree: int = 0
