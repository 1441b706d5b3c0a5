"""ASGI middleware: request ids, per-route latency and counters, option counts."""

from typing import Callable, Any, Optional
import time
import uuid

from fastapi import FastAPI

from vacation_finder.obs.context import request_id_var
from vacation_finder.obs.logger import log_event
from vacation_finder.obs.metrics import record_timing, inc_counter


OPTIONS_HEADER = "x-vacation-options"
UNMATCHED_ROUTE = "<unmatched>"


def _route_template(scope: dict) -> str:
    # Set by the router on match; keeps /foo/1, /foo/2 ... out of the labels
    route = scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class ObservabilityMiddleware:
    def __init__(self, app: FastAPI):
        self.app = app

    async def __call__(self, scope: dict, receive: Callable, send: Callable[[dict], Any]):
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        token = request_id_var.set(str(uuid.uuid4()))
        start = time.monotonic()
        status_code = 500
        options: Optional[int] = None

        async def send_wrapper(message: dict):
            nonlocal status_code, options
            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 200))
                for name, value in message.get("headers", []):
                    if name.lower() == OPTIONS_HEADER.encode():
                        options = int(value)
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            route = _route_template(scope)
            elapsed_ms = (time.monotonic() - start) * 1000.0
            record_timing("request_latency_ms", elapsed_ms, {"route": route})
            inc_counter("requests_total", {"route": route, "status": str(status_code)})
            fields = {}
            if options is not None:
                inc_counter("vacation_options_returned_total", {"route": route}, amount=options)
                fields["options"] = options
            log_event(
                "request",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                route=route,
                status=status_code,
                ms_total=round(elapsed_ms, 2),
                **fields,
            )
            request_id_var.reset(token)
