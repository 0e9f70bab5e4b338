"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from app.schemas.destination import DestinationDetailResponse
from app.schemas.expense import ExpenseResponse


class TripBase(BaseModel):
    """Base trip schema."""
    title: str
    start_date: date
    end_date: date
    budget_limit: Decimal = Field(default=Decimal(0), ge=0)
    cover_photo: Optional[str] = None
    is_public: bool = False


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class TripUpdate(BaseModel):
    """Schema for trip update. Only supplied fields change."""
    title: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget_limit: Optional[Decimal] = Field(default=None, ge=0)
    cover_photo: Optional[str] = None
    is_public: Optional[bool] = None


class TripResponse(TripBase):
    """Schema for trip response (owner view)."""
    id: int
    owner_id: int
    share_token: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class TripSummary(BaseModel):
    """Schema for trip list items."""
    id: int
    title: str
    start_date: date
    end_date: date
    budget_limit: Decimal
    cover_photo: Optional[str] = None
    is_public: bool
    city_count: int = 0
    
    class Config:
        from_attributes = True


class TripDetailResponse(TripResponse):
    """Schema for trip response with its full itinerary and expenses."""
    destinations: List[DestinationDetailResponse] = []
    expenses: List[ExpenseResponse] = []


class SharedTripResponse(BaseModel):
    """Read-only public view of a trip. Owner id and share token are never exposed."""
    id: int
    title: str
    start_date: date
    end_date: date
    budget_limit: Decimal
    cover_photo: Optional[str] = None
    destinations: List[DestinationDetailResponse] = []
    
    class Config:
        from_attributes = True
