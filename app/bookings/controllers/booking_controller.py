from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.bookings.schemas.booking_schema import BookingCreate, BookingOut
from app.bookings.services.booking_service import BookingService
from app.core.database import get_db
from app.core.dependencies import CurrentUser, get_current_user, require_admin

router = APIRouter()


@router.post("", status_code=201)
def create_booking(
    payload: BookingCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    booking = BookingService(db).create_booking(payload, current_user.user_id)
    return {"message": "Booking created successfully", "booking": BookingOut.model_validate(booking)}


@router.get("", dependencies=[Depends(require_admin)])
def get_all_bookings(db: Session = Depends(get_db)):
    bookings = BookingService(db).list_all()
    return [BookingOut.model_validate(booking) for booking in bookings]


@router.get("/user")
def get_user_bookings(current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Bookings made by the caller, newest first."""
    bookings = BookingService(db).list_for_user(current_user.user_id)
    return [BookingOut.model_validate(booking) for booking in bookings]


@router.patch("/{booking_id}/cancel")
def cancel_booking(
    booking_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    booking = BookingService(db).cancel_booking(booking_id, current_user)
    return {"message": "Booking cancelled successfully", "booking": BookingOut.model_validate(booking)}


@router.delete("/{booking_id}", dependencies=[Depends(require_admin)])
def delete_booking(booking_id: str, db: Session = Depends(get_db)):
    BookingService(db).delete_booking(booking_id)
    return {"message": "Booking deleted successfully"}
