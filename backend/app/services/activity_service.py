"""
Activity service: bookable items attached to a destination.

Every mutation re-walks Activity -> Destination -> Trip -> owner, so an
activity whose chain does not end at the caller's trip reads as missing.
"""
import logging
from sqlalchemy.orm import Session
from app.core.exceptions import MissingFieldError, NotFoundError
from app.core.utils import is_blank, supplied_fields
from app.db.repositories import ActivityRepository
from app.models.activity import Activity
from app.schemas.activity import ActivityCreate, ActivityUpdate
from app.services.ownership import find_activity_trip, find_destination_trip

logger = logging.getLogger(__name__)


def _get_owned_activity(db: Session, activity_id: int, owner_id: int) -> Activity:
    if find_activity_trip(db, activity_id, owner_id) is None:
        raise NotFoundError("Activity not found")
    return ActivityRepository(db).get(activity_id)


def add_activity(db: Session, destination_id: int, owner_id: int, data: ActivityCreate) -> Activity:
    """Attach an activity to a destination. time_slot is not checked against the destination's dates."""
    if find_destination_trip(db, destination_id, owner_id) is None:
        raise NotFoundError("Destination not found")
    if is_blank(data.name) or is_blank(data.category):
        raise MissingFieldError("Name and category are required")

    activity = ActivityRepository(db).add(Activity(
        destination_id=destination_id,
        name=data.name,
        category=data.category,
        cost=data.cost,
        time_slot=data.time_slot,
        is_booked=data.is_booked
    ))
    logger.info(f"Added activity {activity.id} to destination {destination_id}")
    return activity


def update_activity(db: Session, activity_id: int, owner_id: int, data: ActivityUpdate) -> Activity:
    activity = _get_owned_activity(db, activity_id, owner_id)
    changes = supplied_fields(data, nullable=("time_slot",))

    for field in ("name", "category"):
        if field in changes and is_blank(changes[field]):
            raise MissingFieldError(f"{field} cannot be blank")

    for field, value in changes.items():
        setattr(activity, field, value)
    activity = ActivityRepository(db).save(activity)
    logger.info(f"Updated activity {activity.id}: {sorted(changes)}")
    return activity


def delete_activity(db: Session, activity_id: int, owner_id: int) -> None:
    activity = _get_owned_activity(db, activity_id, owner_id)
    ActivityRepository(db).delete(activity)
    logger.info(f"Deleted activity {activity_id}")
