"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.trip import Trip
from app.models.destination import Destination
from app.models.activity import Activity
from app.models.expense import Expense

__all__ = [
    "User",
    "Trip",
    "Destination",
    "Activity",
    "Expense",
]
