import logging
import re
from typing import Tuple

from sqlalchemy.orm import Session

from app.core.database import unit_of_work
from app.core.errors import ConflictError, InvalidInputError, UnauthorizedError
from app.core.security import create_access_token, hash_password, verify_password
from app.core.utils import collapse_whitespace
from app.users.models import User, USER_ROLES
from app.users.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")
MIN_PASSWORD_LENGTH = 6


def normalize_email(email) -> str:
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def register(self, name, email, password, role: str = "user") -> User:
        """Create an account. The public endpoint always passes role='user'."""
        name = collapse_whitespace(name)
        email = normalize_email(email)

        errors = []
        if not 2 <= len(name) <= 50:
            errors.append({"field": "name", "message": "Name must be between 2 and 50 characters"})
        if not EMAIL_PATTERN.match(email):
            errors.append({"field": "email", "message": "Please provide a valid email address"})
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            errors.append({"field": "password", "message": "Password must be at least 6 characters"})
        if role not in USER_ROLES:
            errors.append({"field": "role", "message": "Role must be one of: user, admin"})
        if errors:
            raise InvalidInputError("Validation failed", errors)

        if self.users.get_by_email(email):
            raise ConflictError("A user with this email already exists")

        with unit_of_work(self.db, "A user with this email already exists"):
            user = self.users.add(User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=role,
            ))

        self.db.refresh(user)
        logger.info(f"Registered user {user.user_id} ({user.role})")
        return user

    def authenticate(self, email, password) -> Tuple[User, str]:
        """Check credentials and return the user with a fresh access token."""
        user = self.users.get_by_email(normalize_email(email))
        if not user or not verify_password(password, user.password_hash):
            raise UnauthorizedError("Invalid email or password")
        return user, self.issue_token(user)

    def issue_token(self, user: User) -> str:
        return create_access_token(user.user_id, user.email, user.role)

    def get_user(self, user_id: str) -> User:
        return self.users.get_or_404(user_id)

    def promote_to_admin(self, email: str) -> User:
        user = self.users.get_by_email(normalize_email(email))
        if not user:
            raise InvalidInputError(f"No user registered with email {email}")
        with unit_of_work(self.db):
            user.role = "admin"
        self.db.refresh(user)
        logger.info(f"Promoted user {user.user_id} to admin")
        return user
