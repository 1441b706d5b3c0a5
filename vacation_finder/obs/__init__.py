"""Observability helpers.

Structured JSON logging, in-process metrics, request/search context and an
ASGI middleware that ties them together for the HTTP surface.
"""

__all__ = [
    "middleware",
    "metrics",
    "logger",
    "context",
]
