import re
from typing import Annotated, Any, Self

import pydantic

from dualgraph.types import Storage

_EXTENSION_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class GraphDefaults(pydantic.BaseModel):
    """Defaults for graphs built by the CLI when a graph file omits them."""

    storage: Storage = Storage.MATRIX
    oriented: bool = False


class ExportConfig(pydantic.BaseModel):
    """DOT export styling and file options."""

    extension: str = "dot"
    weighted: bool = False
    precision: Annotated[int, pydantic.Field(ge=0)] = 2
    paint_color: str = "red"
    paint_penwidth: Annotated[float, pydantic.Field(gt=0)] = 1.0
    node_shape: str = "circle"
    node_size: Annotated[float, pydantic.Field(gt=0)] = 0.5

    @pydantic.field_validator("extension", mode="before")
    @classmethod
    def strip_leading_dot(cls, v: Any) -> Any:
        """Accept both 'dot' and '.dot'."""
        if isinstance(v, str):
            return v.lstrip(".")
        return v

    @pydantic.field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not _EXTENSION_PATTERN.match(v):
            raise ValueError(f"extension must be alphanumeric, got: {v!r}")
        return v


class DemoConfig(pydantic.BaseModel):
    """Random graph generation for the demo command."""

    vertices: Annotated[int, pydantic.Field(ge=0)] = 50
    density: Annotated[float, pydantic.Field(ge=0, le=1)] = 0.01
    oriented: bool = True
    storage: Storage = Storage.LIST
    seed: int | None = None


class DualgraphConfig(pydantic.BaseModel):
    """Complete dualgraph configuration schema."""

    graph: GraphDefaults = pydantic.Field(default_factory=GraphDefaults)
    export: ExportConfig = pydantic.Field(default_factory=ExportConfig)
    demo: DemoConfig = pydantic.Field(default_factory=DemoConfig)

    @classmethod
    def get_default(cls) -> Self:
        """Get default configuration."""
        return cls()
