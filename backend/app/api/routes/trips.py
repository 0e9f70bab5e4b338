"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.user import User
from app.schemas.trip import (
    TripCreate, TripUpdate, TripResponse, TripSummary,
    TripDetailResponse, SharedTripResponse
)
from app.schemas.budget import BudgetBreakdown
from app.services import trip_service
from app.services.budget_service import compute_budget
from app.core.utils import format_response
from app.api.dependencies import get_current_user

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=List[TripSummary])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips for current user."""
    return trip_service.list_trips(db, current_user.id)


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip."""
    return trip_service.create_trip(db, current_user.id, trip_data)


# Registered before /{trip_id} so "shared" is never parsed as a trip id
@router.get("/shared/{token}", response_model=SharedTripResponse)
async def get_shared_trip(token: str, db: Session = Depends(get_db)):
    """Get a publicly shared trip by its share token. No authentication required."""
    return trip_service.get_shared_trip(db, token)


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get trip with destinations, activities and expenses."""
    return trip_service.get_trip(db, trip_id, current_user.id)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update trip fields. Only supplied fields change."""
    return trip_service.update_trip(db, trip_id, current_user.id, trip_data)


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip and everything under it."""
    trip_service.delete_trip(db, trip_id, current_user.id)
    return format_response({"id": trip_id}, "Trip deleted successfully")


@router.get("/{trip_id}/budget", response_model=BudgetBreakdown)
async def get_budget(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the budget breakdown by category."""
    return compute_budget(db, trip_id, current_user.id)
