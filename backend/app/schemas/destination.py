"""
Pydantic schemas for Destination entity.
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import date, datetime
from app.schemas.activity import ActivityResponse


class DestinationBase(BaseModel):
    """Base destination schema."""
    city_name: str
    country: str
    arrival_date: date
    departure_date: date


class DestinationCreate(DestinationBase):
    """Schema for destination creation. order_index is appended when omitted."""
    order_index: Optional[int] = Field(default=None, ge=0)


class DestinationUpdate(BaseModel):
    """Schema for destination update."""
    city_name: Optional[str] = None
    country: Optional[str] = None
    arrival_date: Optional[date] = None
    departure_date: Optional[date] = None
    order_index: Optional[int] = Field(default=None, ge=0)


class DestinationReorder(BaseModel):
    """
    Complete caller-supplied ordering of a trip's destination ids.

    Left untyped so the reorder service can reject non-array payloads itself.
    """
    destination_ids: Optional[Any] = Field(default=None, alias="destinationIds")
    
    class Config:
        populate_by_name = True


class DestinationResponse(DestinationBase):
    """Schema for destination response."""
    id: int
    trip_id: int
    order_index: int
    created_at: datetime
    
    class Config:
        from_attributes = True


class DestinationDetailResponse(DestinationResponse):
    """Destination with its activities."""
    activities: List[ActivityResponse] = []
