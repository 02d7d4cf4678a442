from datetime import datetime
from typing import Optional

from app.core.schemas import CamelModel


class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserSummary(CamelModel):
    user_id: str
    name: str
    email: str


class UserOut(CamelModel):
    user_id: str
    name: str
    email: str
    role: str
    team_id: Optional[str] = None
    created_at: datetime
