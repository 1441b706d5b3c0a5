from typing import Any, List, Optional


class VacationFinderError(Exception):
    """Base error for the vacation finder."""


class InputError(VacationFinderError):
    """Flight data that cannot be used as given."""


class DateParseError(InputError):
    """A flight date that is not a valid ISO-8601 calendar date.

    Must not subclass ValueError: pydantic folds those into a ValidationError.
    """

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid flight date: {value!r}")


class InvalidFlightRecordError(InputError):
    def __init__(self, index: int, errors: Optional[List[dict]] = None, message: str = ""):
        self.index = index
        self.errors = errors or []
        super().__init__(message or f"Invalid flight record at index {index}")
