from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.dependencies import require_admin
from app.teams.schemas.team_schema import AddPlayerRequest, TeamCreate, TeamOut, TeamStats, TeamUpdate
from app.teams.services.team_service import TeamService

router = APIRouter()


@router.get("")
def get_teams(db: Session = Depends(get_db)):
    """List every team, newest first."""
    teams = TeamService(db).list_teams()
    return [TeamOut.model_validate(team) for team in teams]


@router.get("/{team_id}")
def get_team(team_id: str, db: Session = Depends(get_db)):
    return TeamOut.model_validate(TeamService(db).get_team(team_id))


@router.get("/{team_id}/stats")
def get_team_stats(team_id: str, db: Session = Depends(get_db)):
    return TeamStats(**TeamService(db).get_team_stats(team_id))


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
def create_team(payload: TeamCreate, db: Session = Depends(get_db)):
    team = TeamService(db).create_team(payload)
    return {"message": "Team created successfully", "team": TeamOut.model_validate(team)}


@router.put("/{team_id}", dependencies=[Depends(require_admin)])
def update_team(team_id: str, payload: TeamUpdate, db: Session = Depends(get_db)):
    team = TeamService(db).update_team(team_id, payload)
    return {"message": "Team updated successfully", "team": TeamOut.model_validate(team)}


@router.delete("/{team_id}", dependencies=[Depends(require_admin)])
def delete_team(team_id: str, db: Session = Depends(get_db)):
    """Delete a team and detach it from its players and leagues."""
    TeamService(db).delete_team(team_id)
    return {"message": "Team deleted successfully"}


@router.post("/{team_id}/players", dependencies=[Depends(require_admin)])
def add_player_to_team(team_id: str, payload: AddPlayerRequest, db: Session = Depends(get_db)):
    team = TeamService(db).add_player(team_id, payload.player_id)
    return {"message": "Player added to team", "team": TeamOut.model_validate(team)}


@router.delete("/{team_id}/players/{player_id}", dependencies=[Depends(require_admin)])
def remove_player_from_team(team_id: str, player_id: str, db: Session = Depends(get_db)):
    team = TeamService(db).remove_player(team_id, player_id)
    return {"message": "Player removed from team", "team": TeamOut.model_validate(team)}
