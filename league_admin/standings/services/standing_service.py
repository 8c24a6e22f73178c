import logging
from sqlalchemy.orm import Session
from league_admin.standings.models.standings_model import Standing
from league_admin.standings.schemas.standing_schema import StandingPatch
from league_admin.standings.services.standing_ranking import rank_standings
from league_admin.core.database import atomic
from league_admin.core.utils import generate_custom_id, store_order

logger = logging.getLogger(__name__)


class StandingService:
    def __init__(self, db: Session):
        self.db = db

    def list_standings(self):
        with atomic(self.db):
            return self.db.query(Standing).order_by(*store_order(Standing.standing_id)).all()

    def standings_of(self, zone_id: str):
        """Standings of a zone in creation order, unranked."""
        if not zone_id:
            return []
        with atomic(self.db):
            return (
                self.db.query(Standing)
                .filter(Standing.zone_id == zone_id)
                .order_by(*store_order(Standing.standing_id))
                .all()
            )

    def standings_ranked(self, zone_id: str):
        return rank_standings(self.standings_of(zone_id))

    def get_standing_for(self, team_id: str, zone_id: str):
        with atomic(self.db):
            return (
                self.db.query(Standing)
                .filter(Standing.team_id == team_id, Standing.zone_id == zone_id)
                .first()
            )

    def create_standing_for_team(self, team):
        """Create the zeroed standing paired with a freshly added team."""
        with atomic(self.db):
            new_id = generate_custom_id(self.db, Standing, "S", "standing_id")
            standing = Standing(
                standing_id=new_id,
                team_id=team.team_id,
                league_id=team.league_id,
                category_id=team.category_id,
                zone_id=team.zone_id,
                points=0,
                played=0,
                won=0,
                drawn=0,
                lost=0,
                goals_for=0,
                goals_against=0,
            )
            self.db.add(standing)
            self.db.flush()
            return standing

    def update_standing(self, standing_id: str, patch: StandingPatch):
        """
        Manually correct a standing. `played` and `points` are recomputed from
        the win/draw/loss counts so they stay consistent.
        """
        with atomic(self.db):
            standing = self.db.get(Standing, standing_id)
            if not standing:
                return None

            for key, value in patch.model_dump(exclude_none=True).items():
                setattr(standing, key, value)
            standing.played = standing.won + standing.drawn + standing.lost
            standing.points = 3 * standing.won + standing.drawn

        logger.info(f"Standing {standing_id} corrected by hand")
        return standing
