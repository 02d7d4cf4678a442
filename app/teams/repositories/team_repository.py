from typing import List, Optional
from app.core.repository import BaseRepository
from app.teams.models import Team


class TeamRepository(BaseRepository[Team]):
    model = Team
    id_field = "team_id"
    id_prefix = "T"
    label = "Team"

    def list_newest_first(self) -> List[Team]:
        return self.list(Team.created_at.desc())

    def find_by_normalized_name(self, normalized_name: str, exclude_id: Optional[str] = None) -> Optional[Team]:
        query = self.db.query(Team).filter(Team.normalized_name == normalized_name)
        if exclude_id:
            query = query.filter(Team.team_id != exclude_id)
        return query.first()

    def find_by_email(self, email: str, exclude_id: Optional[str] = None) -> Optional[Team]:
        query = self.db.query(Team).filter(Team.email == email)
        if exclude_id:
            query = query.filter(Team.team_id != exclude_id)
        return query.first()

    def clear_current_league(self, league_id: str) -> int:
        updated = (
            self.db.query(Team)
            .filter(Team.current_league_id == league_id)
            .update({Team.current_league_id: None}, synchronize_session="fetch")
        )
        self.db.flush()
        return updated
