from collections import Counter
from typing import Iterable, List, Optional

from vacation_finder.types import FlightRecord


def main_origin(flights: Iterable[FlightRecord]) -> Optional[str]:
    """Most frequent origin across all records (the traveller's home base).

    Ties go to the origin seen first in input order. Empty input gives None.
    """
    counts = Counter(f.origin for f in flights)
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def resolve_destinations(flights: List[FlightRecord]) -> List[str]:
    """Distinct destinations in first-seen order, minus the main origin."""
    home = main_origin(flights)
    return [d for d in dict.fromkeys(f.destination for f in flights) if d != home]
