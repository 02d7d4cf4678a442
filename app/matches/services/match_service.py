import logging
from datetime import date, datetime, time
from typing import List

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import unit_of_work
from app.core.dependencies import CurrentUser
from app.core.errors import ConflictError, ForbiddenError, InvalidInputError
from app.core.utils import normalize_time, parse_iso_date
from app.matches.models import Match, MatchPlayer, MATCH_STATUSES
from app.matches.repositories.match_repository import MatchRepository
from app.matches.schemas.match_schema import JoinMatchRequest, MatchCreate, MatchUpdate

logger = logging.getLogger(__name__)

TIME_FORMAT_MESSAGE = "Invalid time format. Use HH:MM format"


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def match_starts_at(match: Match) -> datetime:
    hours, minutes = match.time.split(":")
    return datetime.combine(match.date, time(int(hours), int(minutes)))


class MatchService:
    def __init__(self, db: Session):
        self.db = db
        self.matches = MatchRepository(db)

    def list_matches(self) -> List[Match]:
        return self.matches.list_by_schedule()

    def get_match(self, match_id: str) -> Match:
        return self.matches.get_or_404(match_id)

    def create_match(self, payload: MatchCreate, current_user: CurrentUser) -> Match:
        if not current_user.is_admin:
            raise ForbiddenError("Admin access required to create matches")

        name = _clean(payload.name)
        location = _clean(payload.location)
        match_type = _clean(payload.match_type)
        raw_time = _clean(payload.time)
        if not name or not payload.date or not raw_time or not location or not match_type:
            raise InvalidInputError(
                "Missing required fields: name, date, time, location, and matchType are required"
            )

        # Missing or non-positive capacity falls back to a full-size game
        max_players = payload.max_players if payload.max_players and payload.max_players > 0 else settings.DEFAULT_MAX_PLAYERS

        match_date = parse_iso_date(payload.date)
        if match_date is None:
            raise InvalidInputError("Invalid date format")
        if match_date < date.today():
            raise InvalidInputError("Match date cannot be in the past")

        match_time = normalize_time(raw_time)
        if match_time is None:
            raise InvalidInputError(TIME_FORMAT_MESSAGE)

        with unit_of_work(self.db):
            match = self.matches.add(Match(
                match_name=name,
                date=match_date,
                time=match_time,
                location=location,
                match_type=match_type,
                max_players=max_players,
                creator_id=current_user.user_id,
                description=_clean(payload.description),
                status="upcoming",
            ))

        self.db.refresh(match)
        logger.info(f"Created match {match.match_id} on {match.date} {match.time} by {current_user.user_id}")
        return match

    def join_match(self, match_id: str, payload: JoinMatchRequest, current_user: CurrentUser) -> Match:
        player_name = _clean(payload.player_name)
        contact_info = _clean(payload.contact_info)
        if not player_name or not contact_info:
            raise InvalidInputError("Player name and contact info are required")

        match = self.matches.get_or_404(match_id)

        if len(match.joined_players) >= match.max_players:
            raise InvalidInputError("Match is already full")
        if self.matches.find_player(match.match_id, current_user.user_id):
            raise ConflictError("You have already joined this match")
        if match.status != "upcoming":
            raise InvalidInputError("Cannot join a match that is not upcoming")
        if match_starts_at(match) < datetime.now():
            raise InvalidInputError("Cannot join a match that has already started or passed")

        with unit_of_work(self.db, "You have already joined this match"):
            self.matches.add_player(match, MatchPlayer(
                user_id=current_user.user_id,
                player_name=player_name,
                team_name=_clean(payload.team_name),
                contact_info=contact_info,
            ))

        self.db.refresh(match)
        logger.info(f"User {current_user.user_id} joined match {match.match_id} "
                    f"({len(match.joined_players)}/{match.max_players})")
        return match

    def update_match(self, match_id: str, payload: MatchUpdate, current_user: CurrentUser) -> Match:
        match = self.matches.get_or_404(match_id)
        self._check_owner(match, current_user, "update")

        changes = {}
        if _clean(payload.name):
            changes["match_name"] = _clean(payload.name)
        if payload.date:
            match_date = parse_iso_date(payload.date)
            if match_date is None:
                raise InvalidInputError("Invalid date format")
            changes["date"] = match_date
        if payload.time:
            match_time = normalize_time(payload.time)
            if match_time is None:
                raise InvalidInputError(TIME_FORMAT_MESSAGE)
            changes["time"] = match_time
        if _clean(payload.location):
            changes["location"] = _clean(payload.location)
        if _clean(payload.match_type):
            changes["match_type"] = _clean(payload.match_type)
        if payload.description is not None:
            changes["description"] = payload.description.strip()
        if payload.status:
            if payload.status not in MATCH_STATUSES:
                raise InvalidInputError(f"Status must be one of: {', '.join(MATCH_STATUSES)}")
            changes["status"] = payload.status
        if payload.max_players is not None:
            if payload.max_players <= 0:
                raise InvalidInputError("maxPlayers must be a positive number")
            if payload.max_players < len(match.joined_players):
                raise InvalidInputError("maxPlayers cannot be lower than the number of joined players")
            changes["max_players"] = payload.max_players

        with unit_of_work(self.db):
            for field, value in changes.items():
                setattr(match, field, value)

        self.db.refresh(match)
        logger.info(f"Updated match {match.match_id}: {sorted(changes)}")
        return match

    def delete_match(self, match_id: str, current_user: CurrentUser) -> None:
        match = self.matches.get_or_404(match_id)
        self._check_owner(match, current_user, "delete")

        with unit_of_work(self.db):
            self.matches.delete(match)

        logger.info(f"Deleted match {match_id}")

    @staticmethod
    def _check_owner(match: Match, current_user: CurrentUser, action: str) -> None:
        if match.creator_id != current_user.user_id and not current_user.is_admin:
            raise ForbiddenError(f"Only the match creator or admin can {action} this match")
