from datetime import datetime
from sqlalchemy import Column, String, Float, ForeignKey, Date, DateTime, Index, text
from sqlalchemy.orm import relationship
from app.core.database import Base


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        # One live booking per ground slot; cancelled rows free the slot
        Index(
            "uq_bookings_active_slot",
            "ground_id",
            "date",
            "time",
            unique=True,
            sqlite_where=text("status != 'cancelled'"),
            postgresql_where=text("status != 'cancelled'"),
        ),
    )

    booking_id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False, index=True)
    ground_id = Column(String, ForeignKey("grounds.ground_id"), nullable=False)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)  # zero-padded HH:MM
    total_amount = Column(Float, nullable=False)
    status = Column(String, nullable=False, default="confirmed")
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    user = relationship("User", back_populates="bookings")
    ground = relationship("Ground", back_populates="bookings")
