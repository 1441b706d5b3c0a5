from typing import List

from vacation_finder.rank.labels import recommendation_for, season_for
from vacation_finder.types import RankedOption, RoundTripOption


def rank_options(options: List[RoundTripOption]) -> List[RankedOption]:
    if not options:
        return []
    # cheapest first, then longest stay; sorted() is stable for full ties
    ordered = sorted(options, key=lambda x: (x.total_price, -x.stay_duration))
    return [
        RankedOption(
            **dict(op),
            recommendation=recommendation_for(idx, op),
            season_info=season_for(op.outbound.date),
        )
        for idx, op in enumerate(ordered)
    ]
