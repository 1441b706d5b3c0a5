from typing import List

from vacation_finder.formatters.text import (
    format_cheapest,
    format_longest,
    format_search_message,
)
from vacation_finder.types import RankedOption, Summary


FAMILY_MIN_SEATS = 2


def summarize(ranked: List[RankedOption], budget: float, locale: str = "es") -> Summary:
    """Digest of a ranked list: count message, cheapest, longest, family count."""
    message = format_search_message(len(ranked), budget, locale)
    if not ranked:
        return Summary(message=message)

    # min/max keep the first element on ties, i.e. ranked order
    cheapest = min(ranked, key=lambda x: x.total_price)
    longest = max(ranked, key=lambda x: x.stay_duration)

    return Summary(
        message=message,
        cheapest=format_cheapest(cheapest, budget, locale),
        longest=format_longest(longest, locale),
        family_options=sum(1 for op in ranked if op.total_availability >= FAMILY_MIN_SEATS),
    )
