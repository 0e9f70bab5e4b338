"""
Pydantic schemas for Activity entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, time as dt_time
from decimal import Decimal


class ActivityBase(BaseModel):
    """Base activity schema."""
    name: str
    category: str
    cost: Decimal = Field(default=Decimal(0), ge=0)
    time_slot: Optional[dt_time] = None
    is_booked: bool = False


class ActivityCreate(ActivityBase):
    """Schema for activity creation."""
    pass


class ActivityUpdate(BaseModel):
    """Schema for activity update."""
    name: Optional[str] = None
    category: Optional[str] = None
    cost: Optional[Decimal] = Field(default=None, ge=0)
    time_slot: Optional[dt_time] = None
    is_booked: Optional[bool] = None


class ActivityResponse(ActivityBase):
    """Schema for activity response."""
    id: int
    destination_id: int
    created_at: datetime
    
    class Config:
        from_attributes = True
