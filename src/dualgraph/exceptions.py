from typing import override


class GraphError(Exception):
    """Base exception for dualgraph errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)

    def get_suggestion(self) -> str | None:
        """Return actionable suggestion for resolving the error."""
        return None


class VertexOutOfRangeError(GraphError, IndexError):
    """Raised when a vertex id is outside [0, vertex_count)."""

    _vertex: int
    _vertex_count: int

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self._vertex = vertex
        self._vertex_count = vertex_count
        super().__init__(f"Vertex {vertex} is out of range for a graph with {vertex_count} vertices")

    @property
    def vertex(self) -> int:
        return self._vertex

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @override
    def get_suggestion(self) -> str:
        if self._vertex_count == 0:
            return "The graph has no vertices; call add_vertex() first"
        return f"Valid vertex ids are 0..{self._vertex_count - 1}"

    @override
    def __reduce__(self) -> tuple[type, tuple[int, int]]:
        return (self.__class__, (self._vertex, self._vertex_count))


class InvalidEdgeHandleError(GraphError, ValueError):
    """Raised when a paint operation receives something that is not an Edge."""

    pass


class IteratorExhaustedError(GraphError, LookupError):
    """Raised when next() or advance() is called on an exhausted iterator."""

    @override
    def get_suggestion(self) -> str:
        return "Check there_is_more() before calling next() or advance()"


class ConcurrentModificationError(GraphError, RuntimeError):
    """Raised when an iterator is used after its graph changed structure."""

    @override
    def get_suggestion(self) -> str:
        return "Finish iterating before calling apply_edge(), add_vertex() or fill()"


class ExportError(GraphError):
    """Raised when exporting a graph fails."""

    pass


class ExportTargetExistsError(ExportError):
    """Raised when an export target already exists and override was not requested."""

    _path: str

    def __init__(self, path: str) -> None:
        self._path = path
        super().__init__(f"Export target '{path}' already exists")

    @override
    def get_suggestion(self) -> str:
        return "Pass --force (override=True) to replace it"

    @override
    def __reduce__(self) -> tuple[type, tuple[str]]:
        return (self.__class__, (self._path,))


class GraphFileError(GraphError):
    """Raised when a graph description file cannot be read or validated."""

    pass


class ConfigError(GraphError):
    """Raised when configuration files are invalid."""

    pass
