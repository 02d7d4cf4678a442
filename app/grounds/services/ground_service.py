import logging
from typing import List

from sqlalchemy.orm import Session

from app.bookings.repositories.booking_repository import BookingRepository
from app.core.database import unit_of_work
from app.core.errors import InvalidInputError
from app.grounds.models import Ground, Review
from app.grounds.repositories.ground_repository import GroundRepository, ReviewRepository
from app.grounds.schemas.ground_schema import GroundCreate, GroundUpdate, ReviewCreate
from app.matches.repositories.match_repository import MatchRepository

logger = logging.getLogger(__name__)


def parse_features(features) -> List[str]:
    """Accept 'a, b' or ['a', 'b']; trim entries and drop blanks."""
    if isinstance(features, str):
        items = features.split(",")
    elif isinstance(features, (list, tuple)):
        items = features
    else:
        return []
    return [str(item).strip() for item in items if str(item).strip()]


class GroundService:
    def __init__(self, db: Session):
        self.db = db
        self.grounds = GroundRepository(db)
        self.reviews = ReviewRepository(db)
        self.bookings = BookingRepository(db)
        self.matches = MatchRepository(db)

    def list_grounds(self) -> List[Ground]:
        return self.grounds.list_all()

    def create_ground(self, payload: GroundCreate) -> Ground:
        name = (payload.name or "").strip()
        location = (payload.location or "").strip()
        size = (payload.size or "").strip()
        if not name or not location or not size or payload.price_per_hour is None:
            raise InvalidInputError(
                "Missing required fields: name, location, size, and pricePerHour are required"
            )
        if payload.price_per_hour <= 0:
            raise InvalidInputError("pricePerHour must be a positive number")

        with unit_of_work(self.db):
            ground = self.grounds.add(Ground(
                ground_name=name,
                location=location,
                size=size,
                price_per_hour=payload.price_per_hour,
                image=payload.image,
                features=parse_features(payload.features),
                is_available=payload.is_available if payload.is_available is not None else True,
            ))

        self.db.refresh(ground)
        logger.info(f"Created ground {ground.ground_id} '{ground.ground_name}'")
        return ground

    def update_ground(self, ground_id: str, payload: GroundUpdate) -> Ground:
        ground = self.grounds.get_or_404(ground_id)
        provided = payload.model_fields_set

        if payload.price_per_hour is not None and payload.price_per_hour <= 0:
            raise InvalidInputError("pricePerHour must be a positive number")
        for field in ("name", "location", "size"):
            value = getattr(payload, field)
            if value is not None and not value.strip():
                raise InvalidInputError(f"{field.capitalize()} cannot be empty")

        with unit_of_work(self.db):
            if payload.name is not None:
                ground.ground_name = payload.name.strip()
            if payload.location is not None:
                ground.location = payload.location.strip()
            if payload.size is not None:
                ground.size = payload.size.strip()
            if payload.price_per_hour is not None:
                ground.price_per_hour = payload.price_per_hour
            if "image" in provided:
                ground.image = payload.image
            if "features" in provided:
                ground.features = parse_features(payload.features)
            if payload.is_available is not None:
                ground.is_available = payload.is_available

        self.db.refresh(ground)
        logger.info(f"Updated ground {ground.ground_id}")
        return ground

    def delete_ground(self, ground_id: str) -> None:
        ground = self.grounds.get_or_404(ground_id)

        # Matches reference grounds by name through their location
        if self.bookings.count_by_ground(ground.ground_id) or self.matches.count_by_location(ground.ground_name):
            raise InvalidInputError("Cannot delete ground with active bookings or matches")

        with unit_of_work(self.db):
            removed = self.reviews.delete_by_ground(ground.ground_id)
            self.grounds.delete(ground)

        logger.info(f"Deleted ground {ground_id} and {removed} reviews")

    def list_reviews(self, ground_id: str) -> List[Review]:
        self.grounds.get_or_404(ground_id)
        return self.reviews.list_by_ground(ground_id)

    def create_review(self, ground_id: str, payload: ReviewCreate, user_id: str) -> Review:
        rating = payload.rating
        if rating is None or rating != int(rating) or not 1 <= rating <= 5:
            raise InvalidInputError("Rating must be a number between 1 and 5")

        ground = self.grounds.get_or_404(ground_id)

        with unit_of_work(self.db):
            review = self.reviews.add(Review(
                user_id=user_id,
                ground_id=ground.ground_id,
                rating=int(rating),
                comment=(payload.comment or "").strip(),
            ))
            ground.average_rating, ground.review_count = self.reviews.rating_summary(ground.ground_id)

        self.db.refresh(review)
        logger.info(f"User {user_id} reviewed ground {ground_id} ({review.rating}/5)")
        return review
