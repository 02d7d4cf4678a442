from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.dependencies import CurrentUser, get_current_user, require_admin
from app.grounds.schemas.ground_schema import GroundCreate, GroundOut, GroundUpdate, ReviewCreate, ReviewOut
from app.grounds.services.ground_service import GroundService

router = APIRouter()


@router.get("")
def get_grounds(db: Session = Depends(get_db)):
    grounds = GroundService(db).list_grounds()
    return [GroundOut.model_validate(ground) for ground in grounds]


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
def create_ground(payload: GroundCreate, db: Session = Depends(get_db)):
    ground = GroundService(db).create_ground(payload)
    return {"message": "Ground created successfully", "ground": GroundOut.model_validate(ground)}


@router.put("/{ground_id}", dependencies=[Depends(require_admin)])
def update_ground(ground_id: str, payload: GroundUpdate, db: Session = Depends(get_db)):
    ground = GroundService(db).update_ground(ground_id, payload)
    return {"message": "Ground updated successfully", "ground": GroundOut.model_validate(ground)}


@router.delete("/{ground_id}", dependencies=[Depends(require_admin)])
def delete_ground(ground_id: str, db: Session = Depends(get_db)):
    """Delete a ground and its reviews, unless bookings or matches still use it."""
    GroundService(db).delete_ground(ground_id)
    return {"message": "Ground deleted successfully"}


@router.get("/{ground_id}/reviews")
def get_reviews(ground_id: str, db: Session = Depends(get_db)):
    reviews = GroundService(db).list_reviews(ground_id)
    return [ReviewOut.model_validate(review) for review in reviews]


@router.post("/{ground_id}/reviews", status_code=201)
def create_review(
    ground_id: str,
    payload: ReviewCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    review = GroundService(db).create_review(ground_id, payload, current_user.user_id)
    return {"message": "Review submitted successfully", "review": ReviewOut.model_validate(review)}
