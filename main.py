from contextlib import asynccontextmanager
import math
from typing import Any, Dict, List, Literal, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel, Field

from vacation_finder.config import settings
from vacation_finder.data.loader import flights_from_payload, load_flights
from vacation_finder.errors import InputError
from vacation_finder.finder import VacationFinder, export_results
from vacation_finder.obs.logger import log_event
from vacation_finder.obs.metrics import get_metrics_snapshot
from vacation_finder.obs.middleware import OPTIONS_HEADER, ObservabilityMiddleware
from vacation_finder.types import FlightRecord

load_dotenv()


class VacationRequest(BaseModel):
    # Raw dicts so date errors surface as DateParseError, not a body 422
    flights: List[Dict[str, Any]] = Field(default_factory=list)
    budget: Optional[float] = Field(default=None, allow_inf_nan=False)
    locale: Optional[Literal["es", "en"]] = None


def _load_default_flights() -> List[FlightRecord]:
    try:
        flights = load_flights(settings.FLIGHTS_PATH)
    except FileNotFoundError:
        log_event("flights_file_missing", level="WARNING", path=settings.FLIGHTS_PATH)
        return []
    log_event("flights_loaded", path=settings.FLIGHTS_PATH, count=len(flights))
    return flights


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_event("startup", app_env=settings.APP_ENV)
    app.state.flights = _load_default_flights()
    yield
    log_event("shutdown")


app = FastAPI(
    title="Vacation Finder",
    version="1.0.0",
    lifespan=lifespan
)


def _search(response: Response, flights: List[FlightRecord], budget: Optional[float], locale: Optional[str]) -> Dict[str, Any]:
    budget = settings.DEFAULT_BUDGET if budget is None else budget
    locale = locale or settings.LABEL_LOCALE
    results = VacationFinder(flights, locale=locale).find_best_vacations(budget)
    response.headers[OPTIONS_HEADER] = str(len(results.recommendations))
    return export_results(results, budget)


@app.get("/")
async def root():
    return {
        "service": "Vacation Finder",
        "version": "1.0.0",
        "status": "running",
        "features": [
            "Round-trip matching within budget",
            "Cheapest-first ranking",
            "Seasonal tags",
            "Family-friendly counts",
        ]
    }


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "vacation-finder"}


@app.get("/metrics")
async def metrics():
    return get_metrics_snapshot()


@app.post("/vacations")
async def search_vacations(body: VacationRequest, response: Response):
    try:
        flights = flights_from_payload(body.flights)
    except InputError as e:
        log_event("invalid_flights", level="WARNING", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))
    return _search(response, flights, body.budget, body.locale)


@app.get("/vacations")
async def search_default_vacations(
    request: Request,
    response: Response,
    budget: Optional[float] = None,
    locale: Optional[Literal["es", "en"]] = None,
):
    if budget is not None and not math.isfinite(budget):
        raise HTTPException(status_code=422, detail="budget must be a finite number")
    flights = getattr(request.app.state, "flights", None)
    if flights is None:
        flights = _load_default_flights()
        request.app.state.flights = flights
    return _search(response, flights, budget, locale)


# Apply middleware
app = ObservabilityMiddleware(app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
        log_level="info"
    )
