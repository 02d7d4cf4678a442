from typing import List
from app.core.repository import BaseRepository
from app.leagues.models import League
from app.teams.models import Team


class LeagueRepository(BaseRepository[League]):
    model = League
    id_field = "league_id"
    id_prefix = "L"
    label = "League"

    def list_newest_first(self) -> List[League]:
        return self.list(League.created_at.desc())

    def list_by_team(self, team: Team) -> List[League]:
        return list(team.leagues)

    def add_team(self, league: League, team: Team) -> None:
        league.teams.append(team)
        self.db.flush()

    def remove_team_from_all(self, team: Team) -> int:
        """Strip the team from every league roster it appears in."""
        leagues = self.list_by_team(team)
        for league in leagues:
            league.teams.remove(team)
        self.db.flush()
        return len(leagues)

    def clear_roster(self, league: League) -> None:
        league.teams.clear()
        self.db.flush()
