"""
Ownership lookups along the Activity -> Destination -> Trip -> user chain.

Each lookup returns the owning trip, or None when any link is missing or the
trip belongs to someone else. Callers turn None into NotFoundError.
"""
from typing import Optional
from sqlalchemy.orm import Session
from app.db.repositories import ActivityRepository, DestinationRepository, TripRepository
from app.models.trip import Trip


def find_owned_trip(db: Session, trip_id: int, user_id: int) -> Optional[Trip]:
    return TripRepository(db).get_owned(trip_id, user_id)


def find_destination_trip(db: Session, destination_id: int, user_id: int) -> Optional[Trip]:
    destination = DestinationRepository(db).get(destination_id)
    if destination is None:
        return None
    return find_owned_trip(db, destination.trip_id, user_id)


def find_activity_trip(db: Session, activity_id: int, user_id: int) -> Optional[Trip]:
    activity = ActivityRepository(db).get(activity_id)
    if activity is None:
        return None
    return find_destination_trip(db, activity.destination_id, user_id)
