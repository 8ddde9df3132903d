from __future__ import annotations

import pathlib

import pytest

from dualgraph import exceptions, graph_file
from dualgraph.config import models
from dualgraph.traversal import DFSIterator
from dualgraph.types import Storage

from helpers import SCENARIO_YAML


def _graph_path(tmp_path: pathlib.Path, text: str) -> pathlib.Path:
    path = tmp_path / "graph.yaml"
    path.write_text(text)
    return path


def test_load_scenario_file(tmp_path: pathlib.Path) -> None:
    g = graph_file.load_graph_file(_graph_path(tmp_path, SCENARIO_YAML))

    assert g.get_nodes_count() == 9
    assert g.is_oriented_graph()
    assert g.storage_kind == Storage.MATRIX
    assert list(DFSIterator(0, g)) == [0, 2, 4, 8, 7, 3, 6, 5, 1]


def test_edge_forms_and_paint(tmp_path: pathlib.Path) -> None:
    text = """\
vertices: 4
oriented: true
storage: list
edges:
  - [0, 1]
  - [1, 2, 2.5]
  - {from: 2, to: 3, weight: 0.5, painted: true}
painted: [0, 3]
"""
    g = graph_file.load_graph_file(_graph_path(tmp_path, text))

    assert g.storage_kind == Storage.LIST
    assert g.get_edge_weight(0, 1) == 1.0
    assert g.get_edge_weight(1, 2) == 2.5
    assert [e.painted for e in g.get_edges()] == [False, False, True]
    assert [g.painted_node(v) for v in range(4)] == [True, False, False, True]


def test_painted_duplicate_in_matrix_paints_existing_record(tmp_path: pathlib.Path) -> None:
    text = """\
vertices: 2
oriented: false
storage: matrix
edges:
  - [0, 1]
  - {from: 1, to: 0, painted: true}
"""
    g = graph_file.load_graph_file(_graph_path(tmp_path, text))

    assert g.get_edges_count() == 1
    assert g.get_edges()[0].painted


def test_defaults_fill_missing_fields(tmp_path: pathlib.Path) -> None:
    defaults = models.GraphDefaults(storage=Storage.LIST, oriented=True)
    g = graph_file.load_graph_file(_graph_path(tmp_path, "vertices: 2\n"), defaults)

    assert g.storage_kind == Storage.LIST
    assert g.is_oriented_graph()
    assert g.get_edges_count() == 0


@pytest.mark.parametrize(
    "text",
    [
        "- 1\n- 2\n",
        "vertices: -1\n",
        "vertices: 2\nedges:\n  - [0]\n",
        "vertices: 2\nedges:\n  - [0, 1, 1.0, 2]\n",
        "vertices: 2\nunknown: true\n",
        "vertices: 2\nstorage: hash\n",
        "edges: []\n",
    ],
)
def test_invalid_files_raise(tmp_path: pathlib.Path, text: str) -> None:
    with pytest.raises(exceptions.GraphFileError):
        graph_file.load_graph_file(_graph_path(tmp_path, text))


def test_out_of_range_edge_raises(tmp_path: pathlib.Path) -> None:
    path = _graph_path(tmp_path, "vertices: 2\nedges:\n  - [0, 2]\n")
    with pytest.raises(exceptions.GraphFileError, match="out of range"):
        graph_file.load_graph_file(path)


def test_out_of_range_painted_vertex_raises(tmp_path: pathlib.Path) -> None:
    path = _graph_path(tmp_path, "vertices: 2\npainted: [5]\n")
    with pytest.raises(exceptions.GraphFileError):
        graph_file.load_graph_file(path)


def test_invalid_yaml_raises(tmp_path: pathlib.Path) -> None:
    path = _graph_path(tmp_path, "vertices: [1\n")
    with pytest.raises(exceptions.GraphFileError, match="Invalid YAML"):
        graph_file.load_graph_file(path)


def test_missing_file_raises(tmp_path: pathlib.Path) -> None:
    with pytest.raises(exceptions.GraphFileError):
        graph_file.load_graph_file(tmp_path / "missing.yaml")
