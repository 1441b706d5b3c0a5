from collections import defaultdict
from typing import Dict, List

from vacation_finder.match.destinations import resolve_destinations
from vacation_finder.types import FlightRecord, RoundTripOption
from vacation_finder.utils.dates import days_between


def _group_by(flights: List[FlightRecord], attr: str) -> Dict[str, List[FlightRecord]]:
    groups: Dict[str, List[FlightRecord]] = defaultdict(list)
    for f in flights:
        groups[getattr(f, attr)].append(f)
    return groups


def find_round_trip_options(flights: List[FlightRecord], budget: float) -> List[RoundTripOption]:
    """Pair outbound and return legs per destination into round trips.

    A pair qualifies when the return leaves strictly after the outbound and
    both legs together fit the budget. Output is unsorted: destinations in
    resolver order, then outbound/return pairs in input order.
    """
    by_destination = _group_by(flights, "destination")
    by_origin = _group_by(flights, "origin")

    options: List[RoundTripOption] = []
    for dest in resolve_destinations(flights):
        outbound_flights = [f for f in by_destination.get(dest, []) if f.origin != dest]
        return_flights = [f for f in by_origin.get(dest, []) if f.destination != dest]

        for outbound in outbound_flights:
            for ret in return_flights:
                if ret.date <= outbound.date:
                    continue
                total_price = outbound.price + ret.price
                # also rejects a NaN budget
                if not total_price <= budget:
                    continue
                options.append(RoundTripOption(
                    destination=dest,
                    outbound=outbound,
                    return_flight=ret,
                    total_price=total_price,
                    stay_duration=days_between(outbound.date, ret.date),
                    total_availability=min(outbound.availability, ret.availability),
                    savings=budget - total_price,
                ))
    return options
