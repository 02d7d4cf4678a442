from datetime import datetime
from typing import List, Optional, Union

from app.core.schemas import CamelModel


class GroundCreate(CamelModel):
    name: Optional[str] = None
    location: Optional[str] = None
    size: Optional[str] = None
    price_per_hour: Optional[float] = None
    image: Optional[str] = None
    # Either a comma-separated string or a list of feature names
    features: Optional[Union[List[str], str]] = None
    is_available: Optional[bool] = None


class GroundUpdate(GroundCreate):
    pass


class GroundOut(CamelModel):
    ground_id: str
    ground_name: str
    location: str
    size: str
    price_per_hour: float
    image: Optional[str] = None
    features: List[str] = []
    is_available: bool
    average_rating: float
    review_count: int
    created_at: datetime


class GroundSummary(CamelModel):
    ground_id: str
    ground_name: str
    location: str
    image: Optional[str] = None


class ReviewCreate(CamelModel):
    rating: Optional[float] = None
    comment: Optional[str] = None


class ReviewOut(CamelModel):
    review_id: str
    user_id: str
    ground_id: str
    rating: int
    comment: str
    created_at: datetime
