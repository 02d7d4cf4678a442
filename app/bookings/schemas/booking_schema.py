from datetime import date, datetime
from typing import Optional

from app.core.schemas import CamelModel
from app.grounds.schemas.ground_schema import GroundSummary
from app.users.schemas.user_schema import UserSummary


class BookingCreate(CamelModel):
    ground_id: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None


class BookingOut(CamelModel):
    booking_id: str
    user_id: str
    user: Optional[UserSummary] = None
    ground_id: str
    ground: Optional[GroundSummary] = None
    date: date
    time: str
    total_amount: float
    status: str
    created_at: datetime
