from datetime import date, datetime
from typing import List, Optional

from app.core.schemas import CamelModel


class MatchCreate(CamelModel):
    name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    match_type: Optional[str] = None
    max_players: Optional[int] = None
    description: Optional[str] = None


class MatchUpdate(MatchCreate):
    status: Optional[str] = None


class JoinMatchRequest(CamelModel):
    player_name: Optional[str] = None
    contact_info: Optional[str] = None
    team_name: Optional[str] = None


class JoinedPlayerOut(CamelModel):
    user_id: str
    player_name: str
    team_name: str
    contact_info: str
    joined_at: datetime


class MatchOut(CamelModel):
    match_id: str
    match_name: str
    date: date
    time: str
    location: str
    match_type: str
    max_players: int
    creator_id: str
    description: str
    status: str
    joined_players: List[JoinedPlayerOut] = []
    created_at: datetime
