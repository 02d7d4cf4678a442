from datetime import date
from typing import List, Optional
from app.core.repository import BaseRepository
from app.bookings.models import Booking


class BookingRepository(BaseRepository[Booking]):
    model = Booking
    id_field = "booking_id"
    id_prefix = "B"
    label = "Booking"

    def list_all(self) -> List[Booking]:
        return self.list(Booking.created_at.desc())

    def list_by_user(self, user_id: str) -> List[Booking]:
        return (
            self.db.query(Booking)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.created_at.desc())
            .all()
        )

    def find_active_slot(self, ground_id: str, booking_date: date, time: str) -> Optional[Booking]:
        return (
            self.db.query(Booking)
            .filter(
                Booking.ground_id == ground_id,
                Booking.date == booking_date,
                Booking.time == time,
                Booking.status != "cancelled",
            )
            .first()
        )

    def count_by_ground(self, ground_id: str) -> int:
        return self.db.query(Booking).filter(Booking.ground_id == ground_id).count()
