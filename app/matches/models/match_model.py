from datetime import datetime
from sqlalchemy import Column, String, Integer, ForeignKey, Date, DateTime, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from app.core.database import Base

MATCH_STATUSES = ("upcoming", "ongoing", "completed", "cancelled")


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (
        Index("ix_matches_date_time", "date", "time"),
    )

    match_id = Column(String, primary_key=True, index=True)
    match_name = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)  # zero-padded HH:MM
    location = Column(String, nullable=False)
    match_type = Column(String, nullable=False)
    max_players = Column(Integer, nullable=False, default=22)
    creator_id = Column(String, ForeignKey("users.user_id"), nullable=False, index=True)
    status = Column(String, nullable=False, default="upcoming", index=True)
    description = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    creator = relationship("User", back_populates="created_matches")
    joined_players = relationship(
        "MatchPlayer",
        back_populates="match",
        order_by="MatchPlayer.id",
        cascade="all, delete-orphan",
    )


class MatchPlayer(Base):
    __tablename__ = "match_players"
    __table_args__ = (
        UniqueConstraint("match_id", "user_id", name="uq_match_players_match_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(String, ForeignKey("matches.match_id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False)
    player_name = Column(String, nullable=False)
    team_name = Column(String, nullable=False, default="")
    contact_info = Column(String, nullable=False)
    joined_at = Column(DateTime, default=datetime.now, nullable=False)

    match = relationship("Match", back_populates="joined_players")
