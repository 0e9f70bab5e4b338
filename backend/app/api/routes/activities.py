"""
Activity routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.activity import ActivityCreate, ActivityUpdate, ActivityResponse
from app.services import activity_service
from app.core.utils import format_response
from app.api.dependencies import get_current_user

router = APIRouter(prefix="/trips", tags=["activities"])


@router.post(
    "/destinations/{destination_id}/activities",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_activity(
    destination_id: int,
    activity_data: ActivityCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add an activity to a destination."""
    return activity_service.add_activity(db, destination_id, current_user.id, activity_data)


@router.put("/activities/{activity_id}", response_model=ActivityResponse)
async def update_activity(
    activity_id: int,
    activity_data: ActivityUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update an activity."""
    return activity_service.update_activity(db, activity_id, current_user.id, activity_data)


@router.delete("/activities/{activity_id}")
async def delete_activity(
    activity_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an activity."""
    activity_service.delete_activity(db, activity_id, current_user.id)
    return format_response({"id": activity_id}, "Activity deleted successfully")
