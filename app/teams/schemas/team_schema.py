from datetime import datetime
from typing import List, Optional

from app.core.schemas import CamelModel
from app.users.schemas.user_schema import UserSummary


class TeamCreate(CamelModel):
    name: Optional[str] = None
    captain: Optional[str] = None
    password: Optional[str] = None
    logo: Optional[str] = None
    email: Optional[str] = None


class TeamUpdate(CamelModel):
    name: Optional[str] = None
    captain: Optional[str] = None
    logo: Optional[str] = None
    email: Optional[str] = None
    matches_played: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    draws: Optional[int] = None


class AddPlayerRequest(CamelModel):
    player_id: Optional[str] = None


class TeamSummary(CamelModel):
    team_id: str
    team_name: str
    captain: str
    logo: str
    matches_played: int
    wins: int
    losses: int
    draws: int


class TeamOut(CamelModel):
    team_id: str
    team_name: str
    captain: str
    logo: str
    email: Optional[str] = None
    players: List[UserSummary] = []
    current_league_id: Optional[str] = None
    matches_played: int
    wins: int
    losses: int
    draws: int
    created_at: datetime
    updated_at: datetime


class TeamStats(CamelModel):
    team_id: str
    team_name: str
    matches_played: int
    wins: int
    losses: int
    draws: int
    win_rate: float
