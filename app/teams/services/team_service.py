import logging
import re
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import unit_of_work
from app.core.errors import ConflictError, InvalidInputError, NotFoundError
from app.core.security import hash_password
from app.core.utils import collapse_whitespace
from app.leagues.repositories.league_repository import LeagueRepository
from app.teams.models import Team
from app.teams.repositories.team_repository import TeamRepository
from app.teams.schemas.team_schema import TeamCreate, TeamUpdate
from app.users.repositories.user_repository import UserRepository
from app.users.services.user_service import EMAIL_PATTERN, MIN_PASSWORD_LENGTH, normalize_email

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://\S+$")
NAME_MIN, NAME_MAX = 2, 50
COUNTER_FIELDS = ("matches_played", "wins", "losses", "draws")


def normalize_team_name(name) -> str:
    """Display form of a team name: trimmed, single-spaced."""
    return collapse_whitespace(name)


def team_name_key(name) -> str:
    """Uniqueness key for a team name: 'Red  Lions ' and 'red lions' collide."""
    return normalize_team_name(name).casefold()


class TeamService:
    def __init__(self, db: Session):
        self.db = db
        self.teams = TeamRepository(db)
        self.users = UserRepository(db)
        self.leagues = LeagueRepository(db)

    def list_teams(self) -> List[Team]:
        return self.teams.list_newest_first()

    def get_team(self, team_id: str) -> Team:
        return self.teams.get_or_404(team_id)

    def get_team_stats(self, team_id: str) -> dict:
        team = self.teams.get_or_404(team_id)
        win_rate = round(team.wins / team.matches_played * 100, 2) if team.matches_played else 0.0
        return {
            "team_id": team.team_id,
            "team_name": team.team_name,
            "matches_played": team.matches_played,
            "wins": team.wins,
            "losses": team.losses,
            "draws": team.draws,
            "win_rate": win_rate,
        }

    def create_team(self, payload: TeamCreate) -> Team:
        """Validate, de-duplicate and store a new team with a hashed password."""
        name = normalize_team_name(payload.name)
        captain = collapse_whitespace(payload.captain)
        email = normalize_email(payload.email) or None
        logo = (payload.logo or "").strip()

        errors = []
        errors += self._name_errors("name", name, "Team name")
        errors += self._name_errors("captain", captain, "Captain")
        if not isinstance(payload.password, str) or len(payload.password) < MIN_PASSWORD_LENGTH:
            errors.append({"field": "password", "message": "Password must be at least 6 characters"})
        errors += self._contact_errors(logo, email)
        if errors:
            raise InvalidInputError("Validation failed", errors)

        self._ensure_unique(name, email)

        with unit_of_work(self.db, "A team with this name or email already exists"):
            team = self.teams.add(Team(
                team_name=name,
                normalized_name=team_name_key(name),
                captain=captain,
                password_hash=hash_password(payload.password),
                logo=logo or settings.DEFAULT_TEAM_LOGO,
                email=email,
            ))

        self.db.refresh(team)
        logger.info(f"Created team {team.team_id} '{team.team_name}'")
        return team

    def update_team(self, team_id: str, payload: TeamUpdate) -> Team:
        """Apply the supplied fields; the password is never changed here."""
        team = self.teams.get_or_404(team_id)
        provided = payload.model_fields_set
        changes = {}
        errors = []

        if "name" in provided and payload.name is not None:
            changes["team_name"] = normalize_team_name(payload.name)
            errors += self._name_errors("name", changes["team_name"], "Team name")
        if "captain" in provided and payload.captain is not None:
            changes["captain"] = collapse_whitespace(payload.captain)
            errors += self._name_errors("captain", changes["captain"], "Captain")

        logo = None
        if "logo" in provided:
            logo = (payload.logo or "").strip()
            changes["logo"] = logo or settings.DEFAULT_TEAM_LOGO
        email = None
        if "email" in provided:
            # A blank email removes the team's contact address
            email = normalize_email(payload.email) or None
            changes["email"] = email
        errors += self._contact_errors(logo, email)

        for field in COUNTER_FIELDS:
            value = getattr(payload, field)
            if field in provided and value is not None:
                if value < 0:
                    errors.append({"field": field, "message": f"{field} cannot be negative"})
                changes[field] = value

        if errors:
            raise InvalidInputError("Validation failed", errors)

        self._ensure_unique(changes.get("team_name"), changes.get("email"), exclude_id=team.team_id)

        with unit_of_work(self.db, "A team with this name or email already exists"):
            for field, value in changes.items():
                setattr(team, field, value)
            if "team_name" in changes:
                team.normalized_name = team_name_key(changes["team_name"])

        self.db.refresh(team)
        logger.info(f"Updated team {team.team_id}: {sorted(changes)}")
        return team

    def delete_team(self, team_id: str) -> None:
        """Delete a team together with every reference to it, atomically."""
        team = self.teams.get_or_404(team_id)

        with unit_of_work(self.db):
            detached = self.users.clear_team(team.team_id)
            removed = self.leagues.remove_team_from_all(team)
            self.teams.delete(team)

        logger.info(f"Deleted team {team_id}; detached {detached} users, left {removed} leagues")

    def add_player(self, team_id: str, player_id: Optional[str]) -> Team:
        team = self.teams.get_or_404(team_id)
        if not player_id:
            raise InvalidInputError("Player ID is required")

        player = self.users.get(player_id)
        if not player:
            raise NotFoundError("Player not found")
        if player.team_id == team.team_id:
            raise ConflictError("Player is already in this team")
        if player.team_id:
            raise ConflictError("Player already belongs to another team")

        with unit_of_work(self.db):
            team.players.append(player)

        self.db.refresh(team)
        logger.info(f"Added player {player_id} to team {team_id}")
        return team

    def remove_player(self, team_id: str, player_id: str) -> Team:
        team = self.teams.get_or_404(team_id)
        player = self.users.get(player_id)
        if not player:
            raise NotFoundError("Player not found")
        if player.team_id != team.team_id:
            raise InvalidInputError("Player is not in this team")

        with unit_of_work(self.db):
            team.players.remove(player)

        self.db.refresh(team)
        logger.info(f"Removed player {player_id} from team {team_id}")
        return team

    def _ensure_unique(self, name: Optional[str], email: Optional[str], exclude_id: Optional[str] = None) -> None:
        if name and self.teams.find_by_normalized_name(team_name_key(name), exclude_id=exclude_id):
            raise ConflictError("A team with this name already exists")
        if email and self.teams.find_by_email(email, exclude_id=exclude_id):
            raise ConflictError("A team with this email already exists")

    @staticmethod
    def _name_errors(field: str, value: str, label: str) -> List[dict]:
        if not value:
            return [{"field": field, "message": f"{label} is required"}]
        if not NAME_MIN <= len(value) <= NAME_MAX:
            return [{"field": field, "message": f"{label} must be between {NAME_MIN} and {NAME_MAX} characters"}]
        return []

    @staticmethod
    def _contact_errors(logo: Optional[str], email: Optional[str]) -> List[dict]:
        errors = []
        if logo and not URL_PATTERN.match(logo):
            errors.append({"field": "logo", "message": "Logo must be a valid URL"})
        if email and not EMAIL_PATTERN.match(email):
            errors.append({"field": "email", "message": "Please provide a valid email address"})
        return errors
