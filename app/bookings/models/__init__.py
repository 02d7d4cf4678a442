from app.bookings.models.booking_model import Booking
