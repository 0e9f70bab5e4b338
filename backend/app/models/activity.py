"""
Activity model for bookable items at a destination.
"""
from sqlalchemy import Column, String, Boolean, Numeric, Time, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Activity(BaseModel):
    """Activity model. Cost is only ever summed by the budget aggregator."""
    __tablename__ = "activities"
    
    destination_id = Column(Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    cost = Column(Numeric(10, 2), nullable=False, default=0)
    time_slot = Column(Time, nullable=True)  # Bare clock time, no date association
    is_booked = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    destination = relationship("Destination", back_populates="activities")
