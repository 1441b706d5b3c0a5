from conftest import flight

from vacation_finder.match.destinations import main_origin, resolve_destinations


def test_main_origin_is_most_frequent(mixed_flights):
    assert main_origin(mixed_flights) == "EZE"


def test_main_origin_tie_goes_to_first_seen():
    flights = [
        flight("MDZ", "EZE", 100, 1, "2024-01-02"),
        flight("EZE", "MDZ", 100, 1, "2024-01-01"),
    ]
    assert main_origin(flights) == "MDZ"
    assert main_origin(list(reversed(flights))) == "EZE"


def test_main_origin_empty():
    assert main_origin([]) is None


def test_destinations_exclude_main_origin(mixed_flights):
    dests = resolve_destinations(mixed_flights)
    assert "EZE" not in dests
    assert dests == ["BRC", "MDZ", "IGR", "COR"]


def test_destinations_are_distinct():
    flights = [
        flight("EZE", "BRC", 100, 1, "2024-01-01"),
        flight("EZE", "BRC", 120, 1, "2024-01-03"),
        flight("BRC", "EZE", 90, 1, "2024-01-09"),
    ]
    assert resolve_destinations(flights) == ["BRC"]


def test_destinations_empty_input():
    assert resolve_destinations([]) == []
