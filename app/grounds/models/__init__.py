from app.grounds.models.ground_model import Ground
from app.grounds.models.review_model import Review
