from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from vacation_finder.config import settings
from vacation_finder.formatters.text import describe_recommendation, describe_season
from vacation_finder.match.destinations import resolve_destinations
from vacation_finder.match.round_trips import find_round_trip_options
from vacation_finder.obs.context import search_id_var
from vacation_finder.obs.logger import log_event
from vacation_finder.obs.metrics import inc_counter, timed
from vacation_finder.rank.selector import rank_options
from vacation_finder.summary.builder import summarize
from vacation_finder.types import FlightRecord, VacationResults


class VacationFinder:
    """Round-trip search over a fixed list of one-way flights.

    Every call recomputes from the flight list; nothing is cached, so repeated
    searches with the same budget give identical results.
    """

    def __init__(self, flights: List[FlightRecord], locale: Optional[str] = None):
        self.flights = list(flights)
        self.locale = locale or settings.LABEL_LOCALE

    def destinations(self) -> List[str]:
        return resolve_destinations(self.flights)

    def find_best_vacations(self, budget: Optional[float] = None) -> VacationResults:
        if budget is None:
            budget = settings.DEFAULT_BUDGET

        token = search_id_var.set(uuid.uuid4().hex[:12])
        try:
            log_event("vacation_search_started", flights=len(self.flights), budget=budget)
            inc_counter("vacation_searches_total")

            with timed("pipeline_stage_ms", {"stage": "match"}):
                options = find_round_trip_options(self.flights, budget)
            with timed("pipeline_stage_ms", {"stage": "rank"}):
                ranked = rank_options(options)
            with timed("pipeline_stage_ms", {"stage": "summarize"}):
                summary = summarize(ranked, budget, self.locale)

            inc_counter("round_trip_options_total", amount=len(ranked))
            log_event(
                "vacation_search_completed",
                options=len(ranked),
                family_options=summary.family_options,
                cheapest_total=ranked[0].total_price if ranked else None,
            )
            return VacationResults(summary=summary, recommendations=ranked, locale=self.locale)
        finally:
            search_id_var.reset(token)


def export_results(
    results: VacationResults,
    budget: float,
    traveller: Optional[str] = None,
    assistant: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """JSON-ready export payload with generation metadata attached.

    Labels are rendered in the locale the results were built with, so they
    always match the summary text.
    """
    locale = results.locale
    generated_at = generated_at or datetime.now(timezone.utc)

    recommendations = []
    for op in results.recommendations:
        item = op.model_dump(mode="json", by_alias=True)
        item["recommendation"] = describe_recommendation(op.recommendation, locale)
        item["seasonInfo"] = describe_season(op.season_info, locale)
        recommendations.append(item)

    return {
        "generatedAt": generated_at.isoformat(),
        "budget": budget,
        "user": traveller or settings.TRAVELLER_LABEL,
        "assistant": assistant or settings.ASSISTANT_LABEL,
        "summary": results.summary.model_dump(mode="json", by_alias=True),
        "recommendations": recommendations,
    }
