"""
Repository objects wrapping a SQLAlchemy session.

Each repository is constructed per request with the session from `get_db`;
nothing here caches rows between calls.
"""
from typing import List, Optional

from sqlalchemy import func, update
from sqlalchemy.orm import Session, selectinload

from app.models.activity import Activity
from app.models.destination import Destination
from app.models.expense import Expense
from app.models.trip import Trip


class TripRepository:
    """Storage access for trips."""

    def __init__(self, db: Session):
        self._db = db

    def get_owned(self, trip_id: int, owner_id: int) -> Optional[Trip]:
        return self._db.query(Trip).filter(
            Trip.id == trip_id,
            Trip.owner_id == owner_id
        ).first()

    def get_with_children(self, trip_id: int, owner_id: int) -> Optional[Trip]:
        """Trip with destinations, their activities, and expenses eagerly loaded."""
        return self._db.query(Trip).options(
            selectinload(Trip.destinations).selectinload(Destination.activities),
            selectinload(Trip.expenses)
        ).filter(
            Trip.id == trip_id,
            Trip.owner_id == owner_id
        ).first()

    def get_public_by_token(self, share_token: str) -> Optional[Trip]:
        return self._db.query(Trip).options(
            selectinload(Trip.destinations).selectinload(Destination.activities)
        ).filter(
            Trip.share_token == share_token,
            Trip.is_public.is_(True)
        ).first()

    def list_for_owner(self, owner_id: int) -> List[Trip]:
        return self._db.query(Trip).options(
            selectinload(Trip.destinations)
        ).filter(
            Trip.owner_id == owner_id
        ).order_by(Trip.start_date.desc(), Trip.id.desc()).all()

    def add(self, trip: Trip) -> Trip:
        self._db.add(trip)
        self._db.commit()
        self._db.refresh(trip)
        return trip

    def save(self, trip: Trip) -> Trip:
        self._db.commit()
        self._db.refresh(trip)
        return trip

    def delete(self, trip: Trip) -> None:
        self._db.delete(trip)
        self._db.commit()


class DestinationRepository:
    """Storage access for destinations, including the order_index writes."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, destination_id: int) -> Optional[Destination]:
        return self._db.query(Destination).filter(Destination.id == destination_id).first()

    def list_for_trip(self, trip_id: int) -> List[Destination]:
        return self._db.query(Destination).filter(
            Destination.trip_id == trip_id
        ).order_by(Destination.order_index, Destination.id).all()

    def max_order_index(self, trip_id: int) -> Optional[int]:
        """Largest order_index in the trip, or None if it has no destinations."""
        return self._db.query(func.max(Destination.order_index)).filter(
            Destination.trip_id == trip_id
        ).scalar()

    def set_order_index(self, trip_id: int, destination_id: int, order_index: int) -> int:
        """
        Write one position as its own unit of work.

        Scoped to the trip, so ids from other trips match no rows.
        Returns the number of rows updated.
        """
        result = self._db.execute(
            update(Destination)
            .where(Destination.id == destination_id, Destination.trip_id == trip_id)
            .values(order_index=order_index)
        )
        self._db.commit()
        return result.rowcount

    def add(self, destination: Destination) -> Destination:
        self._db.add(destination)
        self._db.commit()
        self._db.refresh(destination)
        return destination

    def save(self, destination: Destination) -> Destination:
        self._db.commit()
        self._db.refresh(destination)
        return destination

    def delete(self, destination: Destination) -> None:
        self._db.delete(destination)
        self._db.commit()

    def expire_all(self) -> None:
        """Drop identity-map state so the next read sees bulk updates."""
        self._db.expire_all()

    def rollback(self) -> None:
        self._db.rollback()


class ActivityRepository:
    """Storage access for activities."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, activity_id: int) -> Optional[Activity]:
        return self._db.query(Activity).filter(Activity.id == activity_id).first()

    def list_for_trip(self, trip_id: int) -> List[Activity]:
        """Activities across every destination of the trip."""
        return self._db.query(Activity).join(
            Destination, Activity.destination_id == Destination.id
        ).filter(
            Destination.trip_id == trip_id
        ).all()

    def add(self, activity: Activity) -> Activity:
        self._db.add(activity)
        self._db.commit()
        self._db.refresh(activity)
        return activity

    def save(self, activity: Activity) -> Activity:
        self._db.commit()
        self._db.refresh(activity)
        return activity

    def delete(self, activity: Activity) -> None:
        self._db.delete(activity)
        self._db.commit()


class ExpenseRepository:
    """Storage access for expenses."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, expense_id: int) -> Optional[Expense]:
        return self._db.query(Expense).filter(Expense.id == expense_id).first()

    def list_for_trip(self, trip_id: int) -> List[Expense]:
        return self._db.query(Expense).filter(
            Expense.trip_id == trip_id
        ).order_by(Expense.date, Expense.id).all()

    def add(self, expense: Expense) -> Expense:
        self._db.add(expense)
        self._db.commit()
        self._db.refresh(expense)
        return expense

    def delete(self, expense: Expense) -> None:
        self._db.delete(expense)
        self._db.commit()
