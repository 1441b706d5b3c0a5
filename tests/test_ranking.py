from datetime import date

import pytest
from conftest import flight

from vacation_finder.rank.labels import LONG_STAY_DAYS, recommendation_for, season_for
from vacation_finder.rank.selector import rank_options
from vacation_finder.types import Recommendation, RoundTripOption, Season


def _option(dest, total, stay, seats=2, month=1):
    out = flight("EZE", dest, total / 2, seats, date(2024, month, 1))
    ret = flight(dest, "EZE", total / 2, seats, date(2024, month, 1 + stay))
    return RoundTripOption(
        destination=dest,
        outbound=out,
        return_flight=ret,
        total_price=total,
        stay_duration=stay,
        total_availability=seats,
        savings=800 - total,
    )


def test_rank_empty():
    assert rank_options([]) == []


def test_sorted_by_price_then_longer_stay_first():
    ranked = rank_options([
        _option("A", 500, 3),
        _option("B", 300, 4),
        _option("C", 300, 9),
        _option("D", 200, 2),
    ])
    assert [r.destination for r in ranked] == ["D", "C", "B", "A"]
    for a, b in zip(ranked, ranked[1:]):
        assert a.total_price <= b.total_price
        if a.total_price == b.total_price:
            assert a.stay_duration >= b.stay_duration


def test_full_ties_keep_input_order():
    ranked = rank_options([_option("X", 300, 5), _option("Y", 300, 5), _option("Z", 300, 5)])
    assert [r.destination for r in ranked] == ["X", "Y", "Z"]


def test_labels_by_position_and_stay():
    ranked = rank_options([
        _option("first", 100, 2),
        _option("long", 200, LONG_STAY_DAYS),
        _option("short", 300, LONG_STAY_DAYS - 1),
    ])
    assert [r.recommendation for r in ranked] == [
        Recommendation.BEST,
        Recommendation.LONG_STAY,
        Recommendation.STANDARD,
    ]


def test_best_label_wins_over_long_stay():
    op = _option("A", 100, 20)
    assert recommendation_for(0, op) == Recommendation.BEST
    assert recommendation_for(1, op) == Recommendation.LONG_STAY


@pytest.mark.parametrize("month,season", [
    (12, Season.SUMMER), (1, Season.SUMMER), (2, Season.SUMMER),
    (3, Season.AUTUMN), (4, Season.AUTUMN), (5, Season.AUTUMN),
    (6, Season.WINTER), (7, Season.WINTER), (8, Season.WINTER),
    (9, Season.SPRING), (10, Season.SPRING), (11, Season.SPRING),
])
def test_season_buckets(month, season):
    assert season_for(date(2024, month, 15)) == season


def test_season_comes_from_outbound_month():
    ranked = rank_options([_option("A", 100, 3, month=7)])
    assert ranked[0].season_info == Season.WINTER


def test_ranked_option_keeps_trip_fields():
    op = _option("A", 400, 6, seats=3)
    ranked = rank_options([op])[0]
    assert ranked.outbound == op.outbound
    assert ranked.return_flight == op.return_flight
    assert ranked.total_availability == 3
    assert ranked.savings == 400
