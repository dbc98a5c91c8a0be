import pytest

from patternkit.cars import Car, Cars, make_sorted_appender


@pytest.fixture
def fleet():
    ford = Car("Fiesta", "Ford", 2008)
    bmw = Car("XL 450", "BMW", 2011)
    merc = Car("D600", "Mercedes", 2009)
    bmw2 = Car("X 800", "BMW", 2008)
    return Cars([ford, bmw, merc, bmw2])


def test_find_all_new_bmws(fleet):
    new_bmws = fleet.find_all(
        lambda c: c.manufacturer == "BMW" and c.build_year > 2010
    )
    assert new_bmws == [fleet[1]]
    assert isinstance(new_bmws, Cars)


def test_find_all_is_subset_preserving_order(fleet):
    old = fleet.find_all(lambda c: c.build_year < 2010)
    assert all(c.build_year < 2010 for c in old)
    assert [c for c in fleet if c in old] == old


def test_process_visits_every_car(fleet):
    seen = []
    fleet.process(seen.append)
    assert seen == list(fleet)


def test_map(fleet):
    assert fleet.map(lambda c: c.model) == ["Fiesta", "XL 450", "D600", "X 800"]


def test_sorted_appender(fleet):
    manufacturers = ["Ford", "Aston Martin", "Land Rover", "BMW", "Jaguar"]
    appender, sorted_cars = make_sorted_appender(manufacturers)
    fleet.process(appender)
    assert set(sorted_cars) == set(manufacturers) | {"Default"}
    assert len(sorted_cars["BMW"]) == 2
    assert sorted_cars["Ford"] == [fleet[0]]
    assert sorted_cars["Default"] == [fleet[2]]
    assert sorted_cars["Jaguar"] == []
    assert sum(len(v) for v in sorted_cars.values()) == len(fleet)