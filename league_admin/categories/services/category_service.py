import logging
from sqlalchemy.orm import Session
from league_admin.categories.models.category_model import Category
from league_admin.categories.schemas.category_schema import CategoryCreate, CategoryPatch
from league_admin.zones.models.zone_model import Zone
from league_admin.zones.services.zone_service import ZoneService
from league_admin.core.database import atomic
from league_admin.core.utils import generate_custom_id, store_order

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db
        self.zone_service = ZoneService(db)

    def list_categories(self):
        with atomic(self.db):
            return self.db.query(Category).order_by(*store_order(Category.category_id)).all()

    def categories_of(self, league_id: str):
        """Categories of a league, in creation order."""
        if not league_id:
            return []
        with atomic(self.db):
            return (
                self.db.query(Category)
                .filter(Category.league_id == league_id)
                .order_by(*store_order(Category.category_id))
                .all()
            )

    def add_category(self, category_data: CategoryCreate):
        with atomic(self.db):
            new_id = generate_custom_id(self.db, Category, "C", "category_id")
            category = Category(category_id=new_id, **category_data.model_dump())
            self.db.add(category)

        logger.info(f"Created category {category.category_id} in league {category.league_id}")
        return category

    def update_category(self, category_id: str, patch: CategoryPatch):
        """Merge the fields set in the patch. A new league is pushed down to every zone below."""
        with atomic(self.db):
            category = self.db.get(Category, category_id)
            if not category:
                return None

            previous_league_id = category.league_id
            for key, value in patch.model_dump(exclude_none=True).items():
                setattr(category, key, value)

            if category.league_id != previous_league_id:
                zones = self.db.query(Zone).filter(Zone.category_id == category_id).all()
                for zone in zones:
                    zone.league_id = category.league_id
                    self.zone_service.sync_descendants(zone)
                logger.info(f"Category {category_id} moved to league {category.league_id} with {len(zones)} zone(s)")
            return category

    def delete_category(self, category_id: str):
        """Delete a category after deleting every zone under it, all in one transaction."""
        with atomic(self.db):
            zone_ids = [
                zone_id
                for (zone_id,) in self.db.query(Zone.zone_id).filter(Zone.category_id == category_id)
            ]
            for zone_id in zone_ids:
                self.zone_service.delete_zone(zone_id)

            deleted = self.db.query(Category).filter(Category.category_id == category_id).delete()

        if deleted:
            logger.info(f"🗑️ Deleted category {category_id} and {len(zone_ids)} zone(s)")
