"""
Destination model: a dated stop nested inside a trip's window.
"""
from sqlalchemy import Column, String, Date, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Destination(BaseModel):
    """A city visited during a trip, sorted for display by order_index."""
    __tablename__ = "destinations"
    
    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    city_name = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)
    arrival_date = Column(Date, nullable=False)
    departure_date = Column(Date, nullable=False)
    # Sort hint, not unique: concurrent appends may produce duplicates until a reorder runs
    order_index = Column(Integer, nullable=False, default=0, index=True)
    
    # Relationships
    trip = relationship("Trip", back_populates="destinations")
    activities = relationship("Activity", back_populates="destination", cascade="all, delete-orphan")
