from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.dependencies import CurrentUser, get_current_user
from app.matches.schemas.match_schema import JoinMatchRequest, MatchCreate, MatchOut, MatchUpdate
from app.matches.services.match_service import MatchService

router = APIRouter()


@router.get("")
def get_matches(db: Session = Depends(get_db)):
    """List matches in schedule order."""
    matches = MatchService(db).list_matches()
    return [MatchOut.model_validate(match) for match in matches]


@router.get("/{match_id}")
def get_match(match_id: str, db: Session = Depends(get_db)):
    return MatchOut.model_validate(MatchService(db).get_match(match_id))


@router.post("", status_code=201)
def create_match(
    payload: MatchCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    match = MatchService(db).create_match(payload, current_user)
    return {"message": "Match created successfully", "match": MatchOut.model_validate(match)}


@router.post("/{match_id}/join")
def join_match(
    match_id: str,
    payload: JoinMatchRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    match = MatchService(db).join_match(match_id, payload, current_user)
    return {"message": "Successfully joined the match", "match": MatchOut.model_validate(match)}


@router.put("/{match_id}")
def update_match(
    match_id: str,
    payload: MatchUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    match = MatchService(db).update_match(match_id, payload, current_user)
    return {"message": "Match updated successfully", "match": MatchOut.model_validate(match)}


@router.delete("/{match_id}")
def delete_match(
    match_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MatchService(db).delete_match(match_id, current_user)
    return {"message": "Match deleted successfully"}
