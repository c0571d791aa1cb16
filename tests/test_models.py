import pytest

from territory_helper.models import (
    Street,
    Territory,
    can_add_variant,
    next_variant,
    parse_house_count,
)


def make_territory(**streets):
    return Territory(name="T", streets=[Street(name, list(numbers)) for name, numbers in streets.items()])


def test_add_street_generates_numbers():
    territory = Territory()
    street = territory.add_street("Main", 3)
    assert street.numbers == ["1", "2", "3"]
    assert territory.streets == [street]


@pytest.mark.parametrize("count", [0, -4])
def test_add_street_non_positive_count_is_empty(count):
    territory = Territory()
    assert territory.add_street("Main", count).numbers == []


def test_streets_keep_insertion_order():
    territory = Territory()
    territory.add_street("B", 1)
    territory.add_street("A", 1)
    assert [s.name for s in territory.streets] == ["B", "A"]


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3), (" 12 ", 12), ("3.7", 3), ("", 0), ("abc", 0), ("-2", -2), ("nan", 0), ("inf", 0)],
)
def test_parse_house_count(raw, expected):
    assert parse_house_count(raw) == expected


@pytest.mark.parametrize(
    "number, expected",
    [("2", "2a"), ("2a", "2b"), ("2b", "2c"), ("2c", None), ("10", "10a"), ("", "a")],
)
def test_next_variant(number, expected):
    assert next_variant(number) == expected
    assert can_add_variant(number) is (expected is not None)


def test_variant_progression_stops_at_c():
    territory = make_territory(S=["1", "2", "3"])
    assert territory.add_variant("S", "2") == "2a"
    assert territory.add_variant("S", "2a") == "2b"
    assert territory.add_variant("S", "2b") == "2c"
    assert territory.streets[0].numbers == ["1", "2", "2a", "2b", "2c", "3"]

    assert territory.add_variant("S", "2c") is None
    assert territory.streets[0].numbers == ["1", "2", "2a", "2b", "2c", "3"]


def test_variant_inserted_right_after_base():
    territory = make_territory(S=["1", "2", "2a", "3"])
    territory.add_variant("S", "2")
    # a second variant off the base lands before the existing one
    assert territory.streets[0].numbers == ["1", "2", "2a", "2a", "3"]


def test_variant_of_absent_number_goes_to_front():
    territory = make_territory(S=["1", "2"])
    assert territory.add_variant("S", "7") == "7a"
    assert territory.streets[0].numbers == ["7a", "1", "2"]


def test_variant_on_unknown_street_is_noop():
    territory = make_territory(S=["1"])
    assert territory.add_variant("Nope", "1") is None
    assert territory.streets[0].numbers == ["1"]


def test_variant_uses_first_street_with_name():
    territory = make_territory()
    territory.streets = [Street("S", ["1"]), Street("S", ["1"])]
    territory.add_variant("S", "1")
    assert territory.streets[0].numbers == ["1", "1a"]
    assert territory.streets[1].numbers == ["1"]


def test_variant_replaces_numbers_list():
    territory = make_territory(S=["1"])
    before = territory.streets[0].numbers
    territory.add_variant("S", "1")
    assert before == ["1"]
    assert territory.streets[0].numbers is not before


def test_remove_number_leaves_siblings():
    territory = make_territory(S=["1", "2", "2a", "2b", "3"])
    assert territory.remove_number("S", "2a") == 1
    assert territory.streets[0].numbers == ["1", "2", "2b", "3"]


def test_remove_number_drops_duplicates():
    territory = make_territory(S=["1", "2", "1"])
    assert territory.remove_number("S", "1") == 2
    assert territory.streets[0].numbers == ["2"]


def test_remove_unknown_is_noop():
    territory = make_territory(S=["1"])
    assert territory.remove_number("S", "9") == 0
    assert territory.remove_number("Nope", "1") == 0
    assert territory.streets[0].numbers == ["1"]


def test_find_street():
    territory = make_territory(A=["1"], B=["2"])
    assert territory.find_street("B").numbers == ["2"]
    assert territory.find_street("C") is None
