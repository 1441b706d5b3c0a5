from datetime import date

from vacation_finder.types import Recommendation, RoundTripOption, Season


LONG_STAY_DAYS = 10

_SEASON_BY_MONTH = {
    12: Season.SUMMER, 1: Season.SUMMER, 2: Season.SUMMER,
    3: Season.AUTUMN, 4: Season.AUTUMN, 5: Season.AUTUMN,
    6: Season.WINTER, 7: Season.WINTER, 8: Season.WINTER,
    9: Season.SPRING, 10: Season.SPRING, 11: Season.SPRING,
}


def season_for(day: date) -> Season:
    return _SEASON_BY_MONTH[day.month]


def recommendation_for(index: int, option: RoundTripOption) -> Recommendation:
    """Label for the option at `index` of the ranked list."""
    if index == 0:
        return Recommendation.BEST
    if option.stay_duration >= LONG_STAY_DAYS:
        return Recommendation.LONG_STAY
    return Recommendation.STANDARD
