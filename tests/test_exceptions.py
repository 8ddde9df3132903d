from __future__ import annotations

import pickle

import pytest

from dualgraph import exceptions


def test_vertex_out_of_range_is_index_error() -> None:
    err = exceptions.VertexOutOfRangeError(5, 3)

    assert isinstance(err, IndexError)
    assert isinstance(err, exceptions.GraphError)
    assert err.vertex == 5
    assert err.vertex_count == 3
    assert "out of range" in str(err)
    assert err.get_suggestion() == "Valid vertex ids are 0..2"


def test_vertex_out_of_range_empty_graph_suggestion() -> None:
    err = exceptions.VertexOutOfRangeError(0, 0)
    assert "add_vertex()" in err.get_suggestion()


@pytest.mark.parametrize(
    ("exc_class", "builtin"),
    [
        (exceptions.InvalidEdgeHandleError, ValueError),
        (exceptions.IteratorExhaustedError, LookupError),
        (exceptions.ConcurrentModificationError, RuntimeError),
    ],
)
def test_builtin_bases(exc_class: type[exceptions.GraphError], builtin: type[Exception]) -> None:
    assert issubclass(exc_class, builtin)
    assert issubclass(exc_class, exceptions.GraphError)


def test_base_error_has_no_suggestion() -> None:
    err = exceptions.GraphFileError("bad file")
    assert err.format_user_message() == "bad file"
    assert err.get_suggestion() is None


def test_export_target_exists_suggests_force() -> None:
    err = exceptions.ExportTargetExistsError("out.dot")
    assert isinstance(err, exceptions.ExportError)
    assert "out.dot" in str(err)
    assert "--force" in err.get_suggestion()


@pytest.mark.parametrize(
    "err",
    [
        exceptions.VertexOutOfRangeError(4, 2),
        exceptions.ExportTargetExistsError("graph.dot"),
        exceptions.ConfigError("broken"),
    ],
)
def test_errors_pickle(err: exceptions.GraphError) -> None:
    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is type(err)
    assert str(restored) == str(err)
