"""
Destination service: keeps each trip's destinations inside its window and
sequenced by order_index.
"""
import logging
from typing import List, Sequence
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import (
    InvalidArgumentError, MissingFieldError, NotFoundError, PartialReorderError
)
from app.core.utils import is_blank, supplied_fields
from app.db.repositories import DestinationRepository
from app.models.destination import Destination
from app.models.trip import Trip
from app.schemas.destination import DestinationCreate, DestinationUpdate
from app.services.date_window import ensure_ordered, ensure_within_window
from app.services.ownership import find_destination_trip
from app.services.trip_service import get_owned_trip_or_404

logger = logging.getLogger(__name__)

ARRIVAL_AFTER_DEPARTURE = "Arrival date must be before departure date"


def _validate_dates(trip: Trip, arrival, departure) -> None:
    ensure_ordered(arrival, departure, ARRIVAL_AFTER_DEPARTURE)
    ensure_within_window(arrival, departure, trip.start_date, trip.end_date)


def _get_owned_destination(db: Session, destination_id: int, owner_id: int):
    trip = find_destination_trip(db, destination_id, owner_id)
    if trip is None:
        raise NotFoundError("Destination not found")
    return trip, DestinationRepository(db).get(destination_id)


def add_destination(db: Session, trip_id: int, owner_id: int, data: DestinationCreate) -> Destination:
    """
    Append a destination to a trip.

    Without an explicit order_index the new row gets max + 1 (0 for the first).
    Two concurrent appends can read the same max and end up sharing an index;
    order_index is only guaranteed dense after a reorder.
    """
    trip = get_owned_trip_or_404(db, trip_id, owner_id)
    if is_blank(data.city_name) or is_blank(data.country):
        raise MissingFieldError("City name, country, arrival_date, and departure_date are required")
    _validate_dates(trip, data.arrival_date, data.departure_date)

    repo = DestinationRepository(db)
    order_index = data.order_index
    if order_index is None:
        current_max = repo.max_order_index(trip.id)
        order_index = 0 if current_max is None else current_max + 1

    destination = repo.add(Destination(
        trip_id=trip.id,
        city_name=data.city_name,
        country=data.country,
        arrival_date=data.arrival_date,
        departure_date=data.departure_date,
        order_index=order_index
    ))
    logger.info(f"Added destination {destination.id} to trip {trip.id} at index {order_index}")
    return destination


def update_destination(db: Session, destination_id: int, owner_id: int, data: DestinationUpdate) -> Destination:
    """Partially update a destination, re-checking its dates against the trip window."""
    trip, destination = _get_owned_destination(db, destination_id, owner_id)
    changes = supplied_fields(data)

    for field in ("city_name", "country"):
        if field in changes and is_blank(changes[field]):
            raise MissingFieldError(f"{field} cannot be blank")

    _validate_dates(
        trip,
        changes.get("arrival_date", destination.arrival_date),
        changes.get("departure_date", destination.departure_date)
    )

    for field, value in changes.items():
        setattr(destination, field, value)
    destination = DestinationRepository(db).save(destination)
    logger.info(f"Updated destination {destination.id}: {sorted(changes)}")
    return destination


def delete_destination(db: Session, destination_id: int, owner_id: int) -> None:
    """Delete a destination and its activities. Siblings are not renumbered."""
    _, destination = _get_owned_destination(db, destination_id, owner_id)
    DestinationRepository(db).delete(destination)
    logger.info(f"Deleted destination {destination_id}")


def reorder_destinations(db: Session, trip_id: int, owner_id: int, ordered_ids: Sequence[int]) -> List[Destination]:
    """
    Assign order_index = position for each id in `ordered_ids`.

    Each position is written and committed on its own. Ids not in the trip
    match nothing; destinations missing from the list keep their index.
    If storage fails partway, the earlier positions stay written and
    PartialReorderError reports how many were applied.
    """
    trip = get_owned_trip_or_404(db, trip_id, owner_id)
    if not isinstance(ordered_ids, (list, tuple)):
        raise InvalidArgumentError("destinationIds must be an array")
    if not all(isinstance(i, int) and not isinstance(i, bool) for i in ordered_ids):
        raise InvalidArgumentError("destinationIds must contain integer ids")

    repo = DestinationRepository(db)
    for position, destination_id in enumerate(ordered_ids):
        try:
            updated = repo.set_order_index(trip.id, destination_id, position)
        except SQLAlchemyError as exc:
            repo.rollback()
            logger.error(
                f"Reorder of trip {trip.id} failed at position {position} "
                f"(destination {destination_id}): {exc}"
            )
            raise PartialReorderError(applied=position, total=len(ordered_ids)) from exc
        if not updated:
            logger.debug(f"Reorder of trip {trip.id}: destination {destination_id} not in trip, skipped")

    repo.expire_all()
    logger.info(f"Reordered {len(ordered_ids)} destination(s) in trip {trip.id}")
    return repo.list_for_trip(trip.id)
