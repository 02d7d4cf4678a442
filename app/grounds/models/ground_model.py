from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, JSON
from sqlalchemy.orm import relationship
from app.core.database import Base


class Ground(Base):
    __tablename__ = "grounds"

    ground_id = Column(String, primary_key=True, index=True)
    ground_name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    size = Column(String, nullable=False)
    price_per_hour = Column(Float, nullable=False)
    image = Column(String, nullable=True)
    features = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True)
    average_rating = Column(Float, nullable=False, default=0.0)
    review_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    reviews = relationship("Review", back_populates="ground")
    bookings = relationship("Booking", back_populates="ground")
