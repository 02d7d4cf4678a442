import logging
from typing import List

from sqlalchemy.orm import Session

from app.bookings.models import Booking
from app.bookings.repositories.booking_repository import BookingRepository
from app.bookings.schemas.booking_schema import BookingCreate
from app.core.database import unit_of_work
from app.core.dependencies import CurrentUser
from app.core.errors import ConflictError, ForbiddenError, InvalidInputError
from app.core.utils import normalize_time, parse_iso_date
from app.grounds.repositories.ground_repository import GroundRepository

logger = logging.getLogger(__name__)

SLOT_TAKEN_MESSAGE = "Already booked for this date and time"


class BookingService:
    def __init__(self, db: Session):
        self.db = db
        self.bookings = BookingRepository(db)
        self.grounds = GroundRepository(db)

    def create_booking(self, payload: BookingCreate, user_id: str) -> Booking:
        """Reserve a ground slot at the ground's current hourly price."""
        if not payload.ground_id or not payload.date or not payload.time:
            raise InvalidInputError("Missing required fields: groundId, date, and time are required")

        booking_date = parse_iso_date(payload.date)
        if booking_date is None:
            raise InvalidInputError("Invalid date format. Use ISO 8601 (e.g., YYYY-MM-DD)")
        slot = normalize_time(payload.time)
        if slot is None:
            raise InvalidInputError("Invalid time format. Use HH:MM format")

        ground = self.grounds.get_or_404(payload.ground_id)

        if self.bookings.find_active_slot(ground.ground_id, booking_date, slot):
            raise ConflictError(SLOT_TAKEN_MESSAGE)

        # The partial unique index catches a concurrent booking of the same slot
        with unit_of_work(self.db, SLOT_TAKEN_MESSAGE):
            booking = self.bookings.add(Booking(
                user_id=user_id,
                ground_id=ground.ground_id,
                date=booking_date,
                time=slot,
                total_amount=ground.price_per_hour,
                status="confirmed",
            ))

        self.db.refresh(booking)
        logger.info(f"Booking {booking.booking_id}: ground {ground.ground_id} on {booking_date} {slot} for {user_id}")
        return booking

    def list_all(self) -> List[Booking]:
        return self.bookings.list_all()

    def list_for_user(self, user_id: str) -> List[Booking]:
        return self.bookings.list_by_user(user_id)

    def cancel_booking(self, booking_id: str, current_user: CurrentUser) -> Booking:
        booking = self.bookings.get_or_404(booking_id)
        if booking.user_id != current_user.user_id and not current_user.is_admin:
            raise ForbiddenError("Only the booking owner or admin can cancel this booking")
        if booking.status == "cancelled":
            raise InvalidInputError("Booking is already cancelled")

        with unit_of_work(self.db):
            booking.status = "cancelled"

        self.db.refresh(booking)
        logger.info(f"Cancelled booking {booking.booking_id}")
        return booking

    def delete_booking(self, booking_id: str) -> None:
        booking = self.bookings.get_or_404(booking_id)
        with unit_of_work(self.db):
            self.bookings.delete(booking)
        logger.info(f"Deleted booking {booking_id}")
