"""Structured JSON logging to stdout, one compact line per event."""

from typing import Any, Dict
from datetime import datetime, timezone
from enum import Enum
import json

from vacation_finder.obs.context import request_id_var, search_id_var


def _default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def log_event(event: str, **fields: Any) -> None:
    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": fields.pop("level", "INFO"),
        "event": event,
        "request_id": request_id_var.get(),
        "search_id": search_id_var.get(),
    }
    payload.update(fields)

    try:
        print(json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=_default))
    except (TypeError, ValueError):
        # Logging must never break a search
        pass
