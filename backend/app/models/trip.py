"""
Trip model: the root of the itinerary graph.
"""
from sqlalchemy import Column, String, Date, Boolean, Numeric, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Trip(BaseModel):
    """A trip owns a date window, a budget ceiling, its destinations and expenses."""
    __tablename__ = "trips"
    
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    budget_limit = Column(Numeric(10, 2), nullable=False, default=0)
    cover_photo = Column(String(500), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False)
    share_token = Column(String(255), unique=True, nullable=True, index=True)  # Opaque public link token
    
    # Relationships
    owner = relationship("User", back_populates="trips")
    destinations = relationship(
        "Destination",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Destination.order_index",
    )
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan")

    @property
    def city_count(self) -> int:
        return len(self.destinations)
