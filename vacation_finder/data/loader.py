from typing import Any, Dict, List
import json

from pydantic import ValidationError

from vacation_finder.errors import InvalidFlightRecordError
from vacation_finder.types import FlightRecord


def flights_from_payload(items: List[Dict[str, Any]]) -> List[FlightRecord]:
    """Build FlightRecords from JSON-like dicts.

    Schema problems (missing fields, negative price or seats) are reported with
    the offending index; an unparsable date raises DateParseError unchanged.
    """
    flights: List[FlightRecord] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise InvalidFlightRecordError(idx, message=f"Flight record at index {idx} is not an object")
        try:
            flights.append(FlightRecord.model_validate(item))
        except ValidationError as e:
            raise InvalidFlightRecordError(
                idx, e.errors(include_url=False), f"Invalid flight record at index {idx}: {e}"
            ) from e
    return flights


def load_flights(path: str) -> List[FlightRecord]:
    """Read flights from a JSON file: a bare array or {"flights": [...]}."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("flights", [])
    if not isinstance(data, list):
        raise InvalidFlightRecordError(-1, message=f"{path} does not contain a list of flights")
    return flights_from_payload(data)
