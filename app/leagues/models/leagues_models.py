from datetime import datetime
from sqlalchemy import Column, String, Date, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from app.core.database import Base

LEAGUE_STATUSES = ("upcoming", "active", "completed")

# League roster: a team may stay listed in completed leagues it played in
league_teams = Table(
    "league_teams",
    Base.metadata,
    Column("league_id", String, ForeignKey("leagues.league_id", ondelete="CASCADE"), primary_key=True),
    Column("team_id", String, ForeignKey("teams.team_id", ondelete="CASCADE"), primary_key=True),
)


class League(Base):
    __tablename__ = "leagues"

    league_id = Column(String, primary_key=True, index=True)
    league_name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default="upcoming")
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    teams = relationship("Team", secondary=league_teams, back_populates="leagues", order_by="Team.team_name")
