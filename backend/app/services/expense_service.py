"""
Expense service for expense-related business logic.
"""
import logging
from sqlalchemy.orm import Session
from app.core.exceptions import MissingFieldError, NotFoundError
from app.core.utils import is_blank
from app.db.repositories import ExpenseRepository
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate
from app.services.date_window import is_within
from app.services.ownership import find_owned_trip
from app.services.trip_service import get_owned_trip_or_404

logger = logging.getLogger(__name__)


def add_expense(db: Session, trip_id: int, owner_id: int, data: ExpenseCreate) -> Expense:
    """
    Record an expense against a trip.

    The date is not required to fall inside the trip window; out-of-window
    dates are accepted and logged.
    """
    trip = get_owned_trip_or_404(db, trip_id, owner_id)
    if is_blank(data.category):
        raise MissingFieldError("Category, amount, and date are required")

    if not is_within(data.date, data.date, trip.start_date, trip.end_date):
        logger.warning(
            f"Expense dated {data.date} recorded outside trip {trip.id} window "
            f"{trip.start_date}..{trip.end_date}"
        )

    expense = ExpenseRepository(db).add(Expense(
        trip_id=trip.id,
        category=data.category,
        amount=data.amount,
        date=data.date,
        description=data.description
    ))
    logger.info(f"Added expense {expense.id} ({expense.category}) to trip {trip.id}")
    return expense


def delete_expense(db: Session, expense_id: int, owner_id: int) -> None:
    """Delete an expense."""
    repo = ExpenseRepository(db)
    expense = repo.get(expense_id)
    if expense is None or find_owned_trip(db, expense.trip_id, owner_id) is None:
        raise NotFoundError("Expense not found")
    repo.delete(expense)
    logger.info(f"Deleted expense {expense_id}")
