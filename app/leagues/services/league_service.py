import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import unit_of_work
from app.core.errors import ConflictError, ForbiddenError, InvalidInputError, NotFoundError
from app.core.utils import collapse_whitespace, parse_iso_date
from app.leagues.models import League, LEAGUE_STATUSES
from app.leagues.repositories.league_repository import LeagueRepository
from app.leagues.schemas.league_schema import LeagueCreate, LeagueUpdate
from app.teams.models import Team
from app.teams.repositories.team_repository import TeamRepository
from app.users.models import User
from app.users.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DATE_FORMAT_MESSAGE = "Use ISO 8601 (e.g., YYYY-MM-DD)"


def derive_status(start_date: date, today: date = None) -> str:
    """A league that has already started is active, otherwise upcoming."""
    today = today or date.today()
    return "active" if start_date <= today else "upcoming"


class LeagueService:
    def __init__(self, db: Session):
        self.db = db
        self.leagues = LeagueRepository(db)
        self.teams = TeamRepository(db)
        self.users = UserRepository(db)

    def list_leagues(self) -> List[League]:
        return self.leagues.list_newest_first()

    def get_league(self, league_id: str) -> League:
        return self.leagues.get_or_404(league_id)

    def create_league(self, payload: LeagueCreate) -> League:
        name = collapse_whitespace(payload.name)
        if not name or not payload.start_date or not payload.end_date:
            raise InvalidInputError("Missing required fields: name, startDate, and endDate are required")

        start = parse_iso_date(payload.start_date)
        end = parse_iso_date(payload.end_date)
        if start is None or end is None:
            raise InvalidInputError(f"Invalid startDate or endDate format. {DATE_FORMAT_MESSAGE}")
        if end <= start:
            raise InvalidInputError("endDate must be after startDate")

        with unit_of_work(self.db):
            league = self.leagues.add(League(
                league_name=name,
                description=(payload.description or "").strip(),
                start_date=start,
                end_date=end,
                status=derive_status(start),
            ))

        self.db.refresh(league)
        logger.info(f"Created league {league.league_id} '{league.league_name}' ({league.status})")
        return league

    def update_league(self, league_id: str, payload: LeagueUpdate) -> League:
        league = self.leagues.get_or_404(league_id)

        start = league.start_date
        if payload.start_date:
            start = parse_iso_date(payload.start_date)
            if start is None:
                raise InvalidInputError(f"Invalid startDate format. {DATE_FORMAT_MESSAGE}")
        end = league.end_date
        if payload.end_date:
            end = parse_iso_date(payload.end_date)
            if end is None:
                raise InvalidInputError(f"Invalid endDate format. {DATE_FORMAT_MESSAGE}")
        if end <= start:
            raise InvalidInputError("endDate must be after startDate")

        if payload.status and payload.status not in LEAGUE_STATUSES:
            raise InvalidInputError(f"Status must be one of: {', '.join(LEAGUE_STATUSES)}")

        with unit_of_work(self.db):
            name = collapse_whitespace(payload.name)
            if name:
                league.league_name = name
            if payload.description is not None:
                league.description = payload.description.strip()
            league.start_date = start
            league.end_date = end
            if payload.status:
                league.status = payload.status

        self.db.refresh(league)
        logger.info(f"Updated league {league.league_id}")
        return league

    def delete_league(self, league_id: str) -> None:
        league = self.leagues.get_or_404(league_id)

        with unit_of_work(self.db):
            released = self.teams.clear_current_league(league.league_id)
            self.leagues.clear_roster(league)
            self.leagues.delete(league)

        logger.info(f"Deleted league {league_id}; released {released} teams")

    def join_league(self, league_id: str, user_id: str) -> League:
        """Enrol the requesting user's team in a league."""
        league = self.leagues.get_or_404(league_id)

        user = self.users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        if not user.team_id:
            raise InvalidInputError("You must be part of a team to join a league")

        team = self.teams.get(user.team_id)
        if not team:
            raise NotFoundError("Team not found")

        self._check_join_policy(user, team)

        if league.status == "completed":
            raise InvalidInputError("Cannot join a completed league")
        if team in league.teams:
            raise ConflictError("Team is already in this league")
        if team.current_league_id and team.current_league_id != league.league_id:
            current = self.leagues.get(team.current_league_id)
            if current is not None and current.status != "completed":
                raise ConflictError("Team is already participating in another league")

        with unit_of_work(self.db):
            self.leagues.add_team(league, team)
            team.current_league_id = league.league_id

        self.db.refresh(league)
        logger.info(f"Team {team.team_id} joined league {league.league_id} (requested by {user.user_id})")
        return league

    @staticmethod
    def _check_join_policy(user: User, team: Team) -> None:
        if settings.LEAGUE_JOIN_POLICY != "captain":
            return
        if collapse_whitespace(team.captain).casefold() != collapse_whitespace(user.name).casefold():
            raise ForbiddenError("Only team captains can join leagues")
