"""
Date window rules for the trip/destination hierarchy.

All windows are inclusive calendar-date ranges.
"""
from datetime import date
from typing import Iterable, List
from app.core.exceptions import InvalidRangeError, OutOfWindowError
from app.models.destination import Destination


def ensure_ordered(start: date, end: date, message: str = "Start date must be before end date") -> None:
    """Reject an inverted range. Equal dates are a valid one-day range."""
    if start > end:
        raise InvalidRangeError(message, details={"start": start.isoformat(), "end": end.isoformat()})


def is_within(arrival: date, departure: date, window_start: date, window_end: date) -> bool:
    return arrival >= window_start and departure <= window_end


def ensure_within_window(arrival: date, departure: date, window_start: date, window_end: date) -> None:
    """Reject destination dates that leave the trip window."""
    if not is_within(arrival, departure, window_start, window_end):
        raise OutOfWindowError(
            "Destination dates must fall within trip date range",
            details={
                "trip_start": window_start.isoformat(),
                "trip_end": window_end.isoformat(),
            }
        )


def stranded_destinations(
    destinations: Iterable[Destination],
    window_start: date,
    window_end: date
) -> List[Destination]:
    """Destinations that would sit outside a proposed trip window."""
    return [
        d for d in destinations
        if not is_within(d.arrival_date, d.departure_date, window_start, window_end)
    ]
