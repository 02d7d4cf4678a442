from typing import List, Optional
from app.core.repository import BaseRepository
from app.matches.models import Match, MatchPlayer


class MatchRepository(BaseRepository[Match]):
    model = Match
    id_field = "match_id"
    id_prefix = "M"
    label = "Match"

    def list_by_schedule(self) -> List[Match]:
        return self.list(Match.date.asc(), Match.time.asc())

    def find_player(self, match_id: str, user_id: str) -> Optional[MatchPlayer]:
        return (
            self.db.query(MatchPlayer)
            .filter(MatchPlayer.match_id == match_id, MatchPlayer.user_id == user_id)
            .first()
        )

    def add_player(self, match: Match, player: MatchPlayer) -> MatchPlayer:
        match.joined_players.append(player)
        self.db.flush()
        return player

    def count_by_location(self, location: str) -> int:
        return self.db.query(Match).filter(Match.location == location).count()
