"""Request- and search-scoped identifiers carried through log lines."""

from contextvars import ContextVar
from typing import Optional


request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
search_id_var: ContextVar[Optional[str]] = ContextVar("search_id", default=None)


def clear_context() -> None:
    """Reset context variables to defaults."""
    request_id_var.set(None)
    search_id_var.set(None)
