import pytest

from flightdb.config import DatasetType
from flightdb.nationality import Nationality, NationalityManager


def test_register_assigns_indices_in_order():
    manager = NationalityManager()
    assert manager.register("Portugal") == 0
    assert manager.register("Spain") == 1
    assert manager.register("France") == 2
    assert len(manager) == 3


def test_register_existing_returns_same_index():
    manager = NationalityManager()
    first = manager.register("Portugal")
    manager.register("Spain")
    assert manager.register("Portugal") == first
    assert len(manager) == 2


def test_get_by_index_round_trip():
    manager = NationalityManager(DatasetType.LARGE)
    for name in ["Brazil", "Chile", "Peru"]:
        index = manager.register(name)
        assert manager.get_by_index(index) == Nationality(name)


def test_index_of_known_and_unknown():
    manager = NationalityManager()
    manager.register("Italy")
    assert manager.index_of("Italy") == 0
    assert manager.index_of("Germany") is None


def test_get_by_index_out_of_range():
    manager = NationalityManager()
    manager.register("Italy")
    with pytest.raises(IndexError):
        manager.get_by_index(1)
    with pytest.raises(IndexError):
        manager.get_by_index(-1)


def test_prepare_keeps_lookup():
    manager = NationalityManager()
    manager.register("Italy")
    manager.register("Greece")
    manager.prepare()
    assert manager.index_of("Greece") == 1
    assert [n.name for n in manager] == ["Italy", "Greece"]


def test_capacity_follows_dataset_type():
    assert NationalityManager(DatasetType.NORMAL).capacity == 55