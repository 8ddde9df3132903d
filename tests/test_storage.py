from __future__ import annotations

import pytest

from dualgraph import storage as graph_storage
from dualgraph.types import Adjacent, Storage


def test_make_storage_selects_strategy() -> None:
    assert isinstance(graph_storage.make_storage(Storage.MATRIX, 2), graph_storage.MatrixStorage)
    assert isinstance(graph_storage.make_storage("list", 2), graph_storage.ListStorage)


def test_make_storage_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        graph_storage.make_storage("tree", 2)


# --- MatrixStorage ---


def test_matrix_insert_reports_first_time_only() -> None:
    store = graph_storage.MatrixStorage(3)
    assert store.insert(0, 1, 1.0) is True
    assert store.insert(0, 1, 2.0) is False
    assert store.weight(0, 1) == 2.0
    assert store.weight(1, 0) is None


def test_matrix_first_neighbor_tracks_minimum() -> None:
    store = graph_storage.MatrixStorage(5)
    assert store.first_neighbor(0) is None

    store.insert(0, 3, 1.0)
    assert store.first_neighbor(0) == 3
    store.insert(0, 4, 1.0)
    assert store.first_neighbor(0) == 3
    store.insert(0, 1, 1.0)
    assert store.first_neighbor(0) == 1


def test_matrix_add_vertex_grows_square() -> None:
    store = graph_storage.MatrixStorage(2)
    store.insert(0, 1, 1.0)
    store.add_vertex()

    assert len(store) == 3
    assert store.weight(0, 2) is None
    assert store.weight(2, 0) is None
    assert store.weight(2, 2) is None
    assert store.first_neighbor(2) is None
    assert store.adjacent(0, 1)


def test_matrix_zero_vertices() -> None:
    store = graph_storage.MatrixStorage(0)
    assert len(store) == 0
    store.add_vertex()
    assert len(store) == 1
    assert not store.adjacent(0, 0)


# --- ListStorage ---


def test_list_insert_always_new_and_keeps_order() -> None:
    store = graph_storage.ListStorage(3)
    assert store.insert(0, 2, 1.0) is True
    assert store.insert(0, 1, 3.0) is True
    assert store.insert(0, 2, 9.0) is True

    assert list(store.adjacents(0)) == [Adjacent(2, 1.0), Adjacent(1, 3.0), Adjacent(2, 9.0)]
    assert store.weight(0, 2) == 1.0


def test_list_adjacents_is_snapshot_of_neighbors() -> None:
    store = graph_storage.ListStorage(2)
    store.insert(0, 1, 1.0)
    it = store.adjacents(0)
    assert it.next() == Adjacent(1, 1.0)


def test_list_add_vertex() -> None:
    store = graph_storage.ListStorage(1)
    store.add_vertex()
    assert len(store) == 2
    assert list(store.adjacents(1)) == []


# --- version counter ---


@pytest.mark.parametrize("kind", list(Storage))
def test_version_bumps_on_structural_change(kind: Storage) -> None:
    store = graph_storage.make_storage(kind, 2)
    assert store.version == 0
    store.insert(0, 1, 1.0)
    assert store.version == 1
    store.add_vertex()
    assert store.version == 2
    store.weight(0, 1)
    store.adjacent(0, 1)
    assert store.version == 2
