import logging
from sqlalchemy.orm import Session
from league_admin.leagues.models.leagues_models import League
from league_admin.leagues.schemas.league_schema import LeagueCreate, LeaguePatch
from league_admin.core.database import atomic
from league_admin.core.utils import generate_custom_id, store_order

logger = logging.getLogger(__name__)


class LeagueService:
    """Leagues are append-only: they can be created and edited, never deleted."""

    def __init__(self, db: Session):
        self.db = db

    def get_league(self, league_id: str):
        with atomic(self.db):
            return self.db.get(League, league_id)

    def list_leagues(self):
        with atomic(self.db):
            return self.db.query(League).order_by(*store_order(League.league_id)).all()

    def add_league(self, league_data: LeagueCreate):
        """Create a league with a fresh ID."""
        with atomic(self.db):
            new_id = generate_custom_id(self.db, League, "L", "league_id")
            league = League(league_id=new_id, **league_data.model_dump())
            self.db.add(league)

        logger.info(f"Created league {league.league_id} ({league.league_name})")
        return league

    def update_league(self, league_id: str, patch: LeaguePatch):
        """Merge the fields set in the patch. Returns None if the league does not exist."""
        with atomic(self.db):
            league = self.db.get(League, league_id)
            if not league:
                return None

            for key, value in patch.model_dump(exclude_none=True).items():
                setattr(league, key, value)
            return league
