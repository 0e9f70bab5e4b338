"""
Destination routes: add, edit, delete and reorder a trip's stops.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.user import User
from app.schemas.destination import (
    DestinationCreate, DestinationUpdate, DestinationReorder, DestinationResponse
)
from app.services import destination_service
from app.core.utils import format_response
from app.api.dependencies import get_current_user

router = APIRouter(prefix="/trips", tags=["destinations"])


@router.post("/{trip_id}/destinations", response_model=DestinationResponse, status_code=status.HTTP_201_CREATED)
async def add_destination(
    trip_id: int,
    destination_data: DestinationCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a destination to a trip."""
    return destination_service.add_destination(db, trip_id, current_user.id, destination_data)


@router.put("/{trip_id}/destinations/reorder", response_model=List[DestinationResponse])
async def reorder_destinations(
    trip_id: int,
    reorder: DestinationReorder,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Reorder destinations.
    destinationIds should list the trip's destination IDs in the desired order.
    Returns the trip's destinations sorted by their new order_index.
    """
    return destination_service.reorder_destinations(db, trip_id, current_user.id, reorder.destination_ids)


@router.put("/destinations/{destination_id}", response_model=DestinationResponse)
async def update_destination(
    destination_id: int,
    destination_data: DestinationUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a destination."""
    return destination_service.update_destination(db, destination_id, current_user.id, destination_data)


@router.delete("/destinations/{destination_id}")
async def delete_destination(
    destination_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a destination and its activities."""
    destination_service.delete_destination(db, destination_id, current_user.id)
    return format_response({"id": destination_id}, "Destination deleted successfully")
