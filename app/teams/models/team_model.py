from datetime import datetime
from sqlalchemy import Column, String, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    team_id = Column(String, primary_key=True, index=True)
    team_name = Column(String(50), nullable=False)
    # Case-folded, whitespace-collapsed team_name; the uniqueness key
    normalized_name = Column(String, unique=True, nullable=False, index=True)
    captain = Column(String(50), nullable=False)
    password_hash = Column(String, nullable=False)
    logo = Column(String, nullable=False, default="")
    email = Column(String, unique=True, nullable=True)
    current_league_id = Column(String, ForeignKey("leagues.league_id"), nullable=True, index=True)

    matches_played = Column(Integer, nullable=False, default=0)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    draws = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    players = relationship("User", back_populates="team", order_by="User.created_at")
    current_league = relationship("League", foreign_keys=[current_league_id])
    leagues = relationship("League", secondary="league_teams", back_populates="teams")
