"""
Trip service: owns the trip date window and budget ceiling.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from app.core.exceptions import MissingFieldError, NotFoundError, RangeConflictError
from app.core.security import generate_share_token
from app.core.utils import is_blank, supplied_fields
from app.db.repositories import DestinationRepository, TripRepository
from app.models.trip import Trip
from app.schemas.trip import TripCreate, TripUpdate
from app.services.date_window import ensure_ordered, stranded_destinations
from app.services.ownership import find_owned_trip

logger = logging.getLogger(__name__)


def get_owned_trip_or_404(db: Session, trip_id: int, user_id: int) -> Trip:
    """Resolve a trip the user owns, or raise NotFoundError."""
    trip = find_owned_trip(db, trip_id, user_id)
    if trip is None:
        raise NotFoundError("Trip not found")
    return trip


def create_trip(db: Session, owner_id: int, data: TripCreate) -> Trip:
    """Create a trip with a fresh share token."""
    if is_blank(data.title):
        raise MissingFieldError("Title, start_date, and end_date are required")
    ensure_ordered(data.start_date, data.end_date)

    trip = Trip(
        owner_id=owner_id,
        title=data.title,
        start_date=data.start_date,
        end_date=data.end_date,
        budget_limit=data.budget_limit,
        cover_photo=data.cover_photo,
        is_public=data.is_public,
        share_token=generate_share_token()
    )
    trip = TripRepository(db).add(trip)
    logger.info(f"Created trip {trip.id} for user {owner_id}")
    return trip


def update_trip(db: Session, trip_id: int, owner_id: int, data: TripUpdate) -> Trip:
    """
    Partially update a trip.

    When dates change, every existing destination must still fit inside the
    new window; otherwise nothing is written and RangeConflictError is raised.
    """
    trip = get_owned_trip_or_404(db, trip_id, owner_id)
    changes = supplied_fields(data, nullable=("cover_photo",))

    if "title" in changes and is_blank(changes["title"]):
        raise MissingFieldError("Title cannot be blank")

    new_start = changes.get("start_date", trip.start_date)
    new_end = changes.get("end_date", trip.end_date)
    ensure_ordered(new_start, new_end)

    if "start_date" in changes or "end_date" in changes:
        destinations = DestinationRepository(db).list_for_trip(trip.id)
        stranded = stranded_destinations(destinations, new_start, new_end)
        if stranded:
            logger.info(
                f"Rejected date change on trip {trip.id}: "
                f"{len(stranded)} destination(s) outside {new_start}..{new_end}"
            )
            raise RangeConflictError(
                "Cannot update dates: some destinations fall outside the new date range",
                details={"destination_ids": [d.id for d in stranded]}
            )

    for field, value in changes.items():
        setattr(trip, field, value)
    trip = TripRepository(db).save(trip)
    logger.info(f"Updated trip {trip.id}: {sorted(changes)}")
    return trip


def delete_trip(db: Session, trip_id: int, owner_id: int) -> None:
    """Delete a trip with all destinations, activities and expenses."""
    trip = get_owned_trip_or_404(db, trip_id, owner_id)
    TripRepository(db).delete(trip)
    logger.info(f"Deleted trip {trip_id}")


def list_trips(db: Session, owner_id: int) -> List[Trip]:
    """Trips owned by the user, most recent start date first."""
    return TripRepository(db).list_for_owner(owner_id)


def get_trip(db: Session, trip_id: int, owner_id: int) -> Trip:
    """Trip with its ordered destinations, their activities, and expenses."""
    trip = TripRepository(db).get_with_children(trip_id, owner_id)
    if trip is None:
        raise NotFoundError("Trip not found")
    return trip


def get_shared_trip(db: Session, share_token: str) -> Trip:
    """Public read-only lookup. Private trips are indistinguishable from missing ones."""
    trip = TripRepository(db).get_public_by_token(share_token)
    if trip is None:
        raise NotFoundError("Trip not found or not publicly shared")
    return trip
