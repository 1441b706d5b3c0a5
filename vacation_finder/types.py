import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from vacation_finder.utils.dates import parse_flight_date


class Season(str, Enum):
    # Southern Hemisphere calendar
    SUMMER = "summer"   # Dec, Jan, Feb
    AUTUMN = "autumn"   # Mar, Apr, May
    WINTER = "winter"   # Jun, Jul, Aug
    SPRING = "spring"   # Sep, Oct, Nov


class Recommendation(str, Enum):
    BEST = "best"
    LONG_STAY = "long_stay"
    STANDARD = "standard"


class FlightRecord(BaseModel):
    """One scheduled flight leg."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    price: float = Field(ge=0, allow_inf_nan=False)
    availability: int = Field(ge=0, description="Seats left on this leg")
    date: datetime.date

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, v):
        # Raises DateParseError, which pydantic lets through untouched
        return parse_flight_date(v)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoundTripOption(_CamelModel):
    destination: str
    outbound: FlightRecord
    return_flight: FlightRecord = Field(alias="return")
    total_price: float
    stay_duration: int = Field(description="Whole days between outbound and return")
    total_availability: int = Field(description="Seats available on both legs")
    savings: float


class RankedOption(RoundTripOption):
    recommendation: Recommendation
    season_info: Season


class Summary(_CamelModel):
    message: str
    cheapest: Optional[str] = None
    longest: Optional[str] = None
    family_options: int = 0


class VacationResults(_CamelModel):
    summary: Summary
    recommendations: List[RankedOption] = Field(default_factory=list)
    locale: str = Field("es", description="Locale the summary text was written in")
