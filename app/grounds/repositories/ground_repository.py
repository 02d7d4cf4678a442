from typing import List, Tuple
from sqlalchemy import func
from app.core.repository import BaseRepository
from app.grounds.models import Ground, Review


class GroundRepository(BaseRepository[Ground]):
    model = Ground
    id_field = "ground_id"
    id_prefix = "G"
    label = "Ground"

    def list_all(self) -> List[Ground]:
        return self.list(Ground.created_at.asc())


class ReviewRepository(BaseRepository[Review]):
    model = Review
    id_field = "review_id"
    id_prefix = "R"
    label = "Review"

    def list_by_ground(self, ground_id: str) -> List[Review]:
        return (
            self.db.query(Review)
            .filter(Review.ground_id == ground_id)
            .order_by(Review.created_at.desc())
            .all()
        )

    def rating_summary(self, ground_id: str) -> Tuple[float, int]:
        """Return (average rating, review count) for a ground."""
        average, count = (
            self.db.query(func.avg(Review.rating), func.count(Review.review_id))
            .filter(Review.ground_id == ground_id)
            .one()
        )
        return float(average or 0.0), int(count or 0)

    def delete_by_ground(self, ground_id: str) -> int:
        deleted = self.db.query(Review).filter(Review.ground_id == ground_id).delete(synchronize_session="fetch")
        self.db.flush()
        return deleted
