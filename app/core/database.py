from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from app.core.config import settings
from app.core.errors import ConflictError


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # In-memory databases only live as long as their single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,   # tests connections before using them
        "pool_recycle": 1800,    # recycle every 30 min to avoid stale connections
        "pool_size": 10,
        "max_overflow": 10,
        "pool_timeout": 30,
    }


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session, conflict_message: str = "A record with this value already exists"):
    """Commit everything done inside the block, or nothing at all.

    Unique-constraint violations surface as ConflictError.
    """
    try:
        yield db
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(conflict_message)
    except Exception:
        db.rollback()
        raise

# Function to initialize the database
def init_db():
    # Import all models here
    from app.core.models import IdSequence
    from app.users.models.user_model import User
    from app.teams.models.team_model import Team
    from app.leagues.models.leagues_models import League, league_teams
    from app.matches.models.match_model import Match, MatchPlayer
    from app.grounds.models.ground_model import Ground
    from app.grounds.models.review_model import Review
    from app.bookings.models.booking_model import Booking

    # Use context manager to ensure connection is released
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
