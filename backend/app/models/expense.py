"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single spending event against a trip."""
    __tablename__ = "expenses"
    
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(String(500), nullable=True)
    
    # Relationships
    trip = relationship("Trip", back_populates="expenses")
