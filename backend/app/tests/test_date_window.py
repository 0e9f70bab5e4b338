"""
Unit tests for the inclusive date window rules.
"""
from datetime import date
import pytest
from app.core.exceptions import InvalidRangeError, OutOfWindowError
from app.models import Destination
from app.services.date_window import ensure_ordered, ensure_within_window, stranded_destinations

JUNE_1 = date(2024, 6, 1)
JUNE_10 = date(2024, 6, 10)


def test_ensure_ordered_accepts_single_day():
    ensure_ordered(JUNE_1, JUNE_1)


def test_ensure_ordered_rejects_inverted():
    with pytest.raises(InvalidRangeError) as exc_info:
        ensure_ordered(JUNE_10, JUNE_1)
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("arrival, departure", [
    (date(2024, 6, 1), date(2024, 6, 10)),
    (date(2024, 6, 2), date(2024, 6, 5)),
    (date(2024, 6, 10), date(2024, 6, 10)),
])
def test_within_window(arrival, departure):
    ensure_within_window(arrival, departure, JUNE_1, JUNE_10)


@pytest.mark.parametrize("arrival, departure", [
    (date(2024, 5, 31), date(2024, 6, 2)),
    (date(2024, 6, 9), date(2024, 6, 12)),
    (date(2024, 5, 1), date(2024, 7, 1)),
])
def test_outside_window(arrival, departure):
    with pytest.raises(OutOfWindowError):
        ensure_within_window(arrival, departure, JUNE_1, JUNE_10)


def test_stranded_destinations():
    inside = Destination(arrival_date=date(2024, 6, 2), departure_date=date(2024, 6, 4))
    late = Destination(arrival_date=date(2024, 6, 6), departure_date=date(2024, 6, 9))
    assert stranded_destinations([inside, late], JUNE_1, date(2024, 6, 5)) == [late]
    assert stranded_destinations([inside, late], JUNE_1, JUNE_10) == []
