from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.dependencies import CurrentUser, get_current_user, require_admin
from app.leagues.schemas.league_schema import LeagueCreate, LeagueOut, LeagueUpdate
from app.leagues.services.league_service import LeagueService

router = APIRouter()


@router.get("")
def get_leagues(db: Session = Depends(get_db)):
    leagues = LeagueService(db).list_leagues()
    return [LeagueOut.model_validate(league) for league in leagues]


@router.get("/{league_id}")
def get_league(league_id: str, db: Session = Depends(get_db)):
    return LeagueOut.model_validate(LeagueService(db).get_league(league_id))


@router.post("", status_code=201, dependencies=[Depends(get_current_user)])
def create_league(payload: LeagueCreate, db: Session = Depends(get_db)):
    league = LeagueService(db).create_league(payload)
    return {"message": "League created successfully", "league": LeagueOut.model_validate(league)}


@router.put("/{league_id}", dependencies=[Depends(require_admin)])
def update_league(league_id: str, payload: LeagueUpdate, db: Session = Depends(get_db)):
    league = LeagueService(db).update_league(league_id, payload)
    return {"message": "League updated successfully", "league": LeagueOut.model_validate(league)}


@router.delete("/{league_id}", dependencies=[Depends(require_admin)])
def delete_league(league_id: str, db: Session = Depends(get_db)):
    LeagueService(db).delete_league(league_id)
    return {"message": "League deleted successfully"}


@router.post("/{league_id}/join")
def join_league(
    league_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Enrol the caller's team in the league."""
    league = LeagueService(db).join_league(league_id, current_user.user_id)
    return {"message": "Successfully joined league", "league": LeagueOut.model_validate(league)}
