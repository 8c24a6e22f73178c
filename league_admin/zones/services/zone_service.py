import logging
from sqlalchemy.orm import Session
from league_admin.zones.models.zone_model import Zone
from league_admin.zones.schemas.zone_schema import ZoneCreate, ZonePatch
from league_admin.categories.models.category_model import Category
from league_admin.teams.models.team_model import Team
from league_admin.fixtures.models.fixture_model import Fixture
from league_admin.standings.models.standings_model import Standing
from league_admin.core.database import atomic
from league_admin.core.utils import generate_custom_id, store_order

logger = logging.getLogger(__name__)


class ZoneService:
    def __init__(self, db: Session):
        self.db = db

    def list_zones(self):
        with atomic(self.db):
            return self.db.query(Zone).order_by(*store_order(Zone.zone_id)).all()

    def zones_of(self, category_id: str):
        """Zones of a category, in creation order."""
        if not category_id:
            return []
        with atomic(self.db):
            return (
                self.db.query(Zone)
                .filter(Zone.category_id == category_id)
                .order_by(*store_order(Zone.zone_id))
                .all()
            )

    def add_zone(self, zone_data: ZoneCreate):
        with atomic(self.db):
            new_id = generate_custom_id(self.db, Zone, "Z", "zone_id")
            zone = Zone(zone_id=new_id, **zone_data.model_dump())
            self.db.add(zone)

        logger.info(f"Created zone {zone.zone_id} in category {zone.category_id}")
        return zone

    def update_zone(self, zone_id: str, patch: ZonePatch):
        """
        Merge the fields set in the patch. Moving the zone to another category
        (or league) rewrites those ids on its teams, fixtures and standings.
        """
        with atomic(self.db):
            zone = self.db.get(Zone, zone_id)
            if not zone:
                return None

            previous = (zone.league_id, zone.category_id)
            for key, value in patch.model_dump(exclude_none=True).items():
                setattr(zone, key, value)

            if patch.category_id is not None:
                category = self.db.get(Category, zone.category_id)
                if category:
                    zone.league_id = category.league_id

            if (zone.league_id, zone.category_id) != previous:
                self.sync_descendants(zone)
                logger.info(f"Zone {zone_id} moved to category {zone.category_id} of league {zone.league_id}")
            return zone

    def sync_descendants(self, zone):
        """Copy the zone's league and category ids onto its teams, fixtures and standings."""
        values = {"league_id": zone.league_id, "category_id": zone.category_id}
        for model in (Team, Fixture, Standing):
            self.db.query(model).filter(model.zone_id == zone.zone_id).update(values)

    def delete_zone(self, zone_id: str):
        """
        Delete a zone together with its teams, fixtures and standings.

        Teams are removed directly rather than through the team delete, so
        matches outside this zone are not inspected. A team only ever belongs
        to one zone, so no such match can exist.
        """
        with atomic(self.db):
            # Standings and matches reference teams, so they go first
            standings = self.db.query(Standing).filter(Standing.zone_id == zone_id).delete()

            fixtures = self.db.query(Fixture).filter(Fixture.zone_id == zone_id).all()
            for fixture in fixtures:
                self.db.delete(fixture)
            self.db.flush()

            teams = self.db.query(Team).filter(Team.zone_id == zone_id).delete()
            deleted = self.db.query(Zone).filter(Zone.zone_id == zone_id).delete()

        if deleted:
            logger.info(
                f"🗑️ Deleted zone {zone_id}: {teams} team(s), {len(fixtures)} fixture(s), {standings} standing(s)"
            )
