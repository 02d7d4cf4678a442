from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base

USER_ROLES = ("user", "admin")


class User(Base):
    __tablename__ = "users"

    user_id = Column(String, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")
    team_id = Column(String, ForeignKey("teams.team_id"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    team = relationship("Team", back_populates="players")
    created_matches = relationship("Match", back_populates="creator")
    bookings = relationship("Booking", back_populates="user")
    reviews = relationship("Review", back_populates="user")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
