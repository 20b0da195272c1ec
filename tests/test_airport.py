import pytest

from flightdb.airport import AirportManager, code_to_int, int_to_code
from flightdb.config import DatasetType


@pytest.fixture
def manager():
    m = AirportManager(DatasetType.NORMAL)
    m.register("OPO", "Porto", "Porto", "large_airport", "PT")
    m.register("LIS", "Lisbon", "Lisbon", "large_airport", "PT")
    m.register("MAD", "Madrid", "Madrid", "large_airport", "ES")
    return m


def test_code_to_int_of_first_code_is_zero():
    assert code_to_int("AAA") == 0
    assert int_to_code(0) == "AAA"


@pytest.mark.parametrize("code", ["LIS", "OPO", "ZZZ", "JFK", "ABC"])
def test_code_round_trip(code):
    assert int_to_code(code_to_int(code)) == code


def test_code_order_follows_alphabet():
    assert code_to_int("AAB") < code_to_int("ABA") < code_to_int("BAA")


def test_code_to_int_rejects_bad_length():
    with pytest.raises(ValueError):
        code_to_int("LISB")


def test_register_and_get(manager):
    airport = manager.get("LIS")
    assert airport.name == "Lisbon"
    assert airport.country == "PT"
    assert airport.code_string == "LIS"
    assert manager.get(code_to_int("OPO")).city == "Porto"
    assert manager.get("XYZ") is None
    assert len(manager) == 3


def test_arrival_and_departure_counts_start_at_zero(manager):
    airport = manager.get("MAD")
    assert (airport.arrival_count, airport.departure_count) == (0, 0)


def test_most_visited_between_days(manager):
    for _ in range(3):
        manager.increment_day_count(5, "LIS")
    manager.increment_day_count(5, "OPO")
    manager.increment_day_count(10, "OPO")
    manager.increment_day_count(10, "OPO")
    manager.increment_day_count(10, "OPO")
    manager.increment_day_count(10, "OPO")
    manager.prepare()

    airport, visits = manager.most_visited_between_days(0, 6)
    assert (airport.code_string, visits) == ("LIS", 3)

    airport, visits = manager.most_visited_between_days(6, 20)
    assert (airport.code_string, visits) == ("OPO", 4)

    airport, visits = manager.most_visited_between_days(0, 300)
    assert (airport.code_string, visits) == ("OPO", 5)


def test_between_days_ties_go_to_lowest_code(manager):
    manager.increment_day_count(1, "OPO")
    manager.increment_day_count(1, "LIS")
    manager.prepare()
    airport, visits = manager.most_visited_between_days(1, 1)
    assert (airport.code_string, visits) == ("LIS", 1)


def test_between_days_with_no_visits_picks_lowest_code(manager):
    manager.prepare()
    airport, visits = manager.most_visited_between_days(0, 0)
    assert (airport.code_string, visits) == ("LIS", 0)


@pytest.mark.parametrize("first, last", [(10, 5), (273, 400), (-10, -1)])
def test_between_days_out_of_range(manager, first, last):
    manager.prepare()
    assert manager.most_visited_between_days(first, last) is None


def test_negative_first_day_counts_from_start(manager):
    manager.increment_day_count(0, "MAD")
    manager.prepare()
    airport, visits = manager.most_visited_between_days(-5, 0)
    assert (airport.code_string, visits) == ("MAD", 1)


def test_range_query_requires_prepare(manager):
    with pytest.raises(RuntimeError):
        manager.most_visited_between_days(0, 1)


def test_prepare_twice_raises(manager):
    manager.prepare()
    with pytest.raises(RuntimeError):
        manager.prepare()


def test_most_visited_by_nationality(manager):
    manager.increment_nationality_count(2, "MAD")
    manager.increment_nationality_count(2, "MAD")
    manager.increment_nationality_count(2, "OPO")
    manager.increment_nationality_count(3, "OPO")
    airport, visits = manager.most_visited_by_nationality(2)
    assert (airport.code_string, visits) == ("MAD", 2)
    airport, visits = manager.most_visited_by_nationality(3)
    assert (airport.code_string, visits) == ("OPO", 1)


def test_unknown_nationality_gives_none(manager):
    assert manager.most_visited_by_nationality(None) is None


def test_empty_manager_gives_none():
    m = AirportManager()
    assert m.most_visited_by_nationality(0) is None
    m.prepare()
    assert m.most_visited_between_days(0, 10) is None


def test_increment_unknown_airport_raises(manager):
    with pytest.raises(KeyError):
        manager.increment_day_count(0, "XYZ")
    with pytest.raises(KeyError):
        manager.increment_nationality_count(0, "XYZ")


def test_increment_day_out_of_range_raises(manager):
    with pytest.raises(IndexError):
        manager.increment_day_count(273, "LIS")