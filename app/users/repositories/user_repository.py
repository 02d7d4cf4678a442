from typing import Optional
from app.core.repository import BaseRepository
from app.users.models import User


class UserRepository(BaseRepository[User]):
    model = User
    id_field = "user_id"
    id_prefix = "U"
    label = "User"

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def clear_team(self, team_id: str) -> int:
        """Detach every user pointing at the team; returns the number updated."""
        updated = (
            self.db.query(User)
            .filter(User.team_id == team_id)
            .update({User.team_id: None}, synchronize_session="fetch")
        )
        self.db.flush()
        return updated
