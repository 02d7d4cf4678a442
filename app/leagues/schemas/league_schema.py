from datetime import date, datetime
from typing import List, Optional

from app.core.schemas import CamelModel
from app.teams.schemas.team_schema import TeamSummary


class LeagueCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class LeagueUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None


class LeagueOut(CamelModel):
    league_id: str
    league_name: str
    description: str
    start_date: date
    end_date: date
    status: str
    teams: List[TeamSummary] = []
    created_at: datetime
