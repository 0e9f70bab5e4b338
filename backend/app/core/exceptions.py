"""
Domain errors raised by the itinerary services.

Each error carries the HTTP status it maps to; the API layer renders them
with a single exception handler.
"""
from typing import Any, Optional


class ItineraryError(Exception):
    """Base class for itinerary validation and lookup failures."""
    status_code: int = 400

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRangeError(ItineraryError):
    """A start/end or arrival/departure pair is inverted."""


class OutOfWindowError(ItineraryError):
    """Destination dates fall outside the owning trip's window."""


class RangeConflictError(ItineraryError):
    """A trip date change would leave existing destinations outside the window."""
    status_code = 409


class MissingFieldError(ItineraryError):
    """A required input field is blank or absent."""


class NotFoundError(ItineraryError):
    """Entity is missing or does not belong to the caller's trip."""
    status_code = 404


class InvalidArgumentError(ItineraryError):
    """Bulk input is malformed."""


class PartialReorderError(ItineraryError):
    """
    Storage failed partway through a reorder.

    Positions before `applied` were written; the rest kept their old index.
    Callers should re-fetch the trip to get the authoritative order.
    """
    status_code = 409

    def __init__(self, applied: int, total: int):
        super().__init__(
            f"Reorder stopped after {applied} of {total} destinations",
            details={"applied": applied, "total": total},
        )
        self.applied = applied
        self.total = total
