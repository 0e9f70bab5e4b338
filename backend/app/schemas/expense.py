"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal


class ExpenseBase(BaseModel):
    """Base expense schema."""
    category: str
    amount: Decimal = Field(ge=0)
    date: dt_date
    description: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation."""
    pass


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: int
    trip_id: int
    created_at: datetime
    
    class Config:
        from_attributes = True
