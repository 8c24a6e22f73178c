import threading
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from league_admin.core.config import settings


def _engine_options(url: str) -> dict:
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session would see its own empty database
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
            "pool_reset_on_return": None,
        }
    return {"pool_pre_ping": True}


engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, **_engine_options(settings.DATABASE_URL))

# Objects stay readable after commit; reads happen outside the engine lock
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Base class for models
Base = declarative_base()

# One writer at a time across the whole engine
engine_lock = threading.RLock()


@contextmanager
def atomic(db):
    """
    Run a block as a single engine transaction.

    Holds the engine lock for the whole block, commits when the outermost block
    exits cleanly and rolls everything back if anything inside raises. Nested
    blocks on the same session join the outer transaction.
    """
    with engine_lock:
        depth = db.info.get("atomic_depth", 0)
        db.info["atomic_depth"] = depth + 1
        try:
            yield db
            if depth == 0:
                db.commit()
        except Exception:
            if depth == 0:
                db.rollback()
            raise
        finally:
            db.info["atomic_depth"] = depth


# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Function to initialize the database
def init_db():
    # Import all models here
    from league_admin.core.utils import IdSequence
    from league_admin.leagues.models.leagues_models import League
    from league_admin.categories.models.category_model import Category
    from league_admin.zones.models.zone_model import Zone
    from league_admin.teams.models.team_model import Team
    from league_admin.fixtures.models.fixture_model import Fixture
    from league_admin.matches.models.match_model import Match
    from league_admin.standings.models.standings_model import Standing

    # Use context manager to ensure connection is released
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
