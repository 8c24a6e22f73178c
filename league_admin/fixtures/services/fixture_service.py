import logging
from sqlalchemy.orm import Session
from league_admin.fixtures.models.fixture_model import Fixture
from league_admin.fixtures.schemas.fixture_schema import FixtureCreate, FixturePatch
from league_admin.matches.models.match_model import Match
from league_admin.matches.schemas.match_schema import MatchIn
from league_admin.core.database import atomic
from league_admin.core.utils import generate_custom_id, store_order

logger = logging.getLogger(__name__)


class FixtureService:
    def __init__(self, db: Session):
        self.db = db

    def list_fixtures(self):
        with atomic(self.db):
            return self.db.query(Fixture).order_by(*store_order(Fixture.fixture_id)).all()

    def fixtures_of(self, zone_id: str):
        """Fixtures of a zone, in creation order."""
        if not zone_id:
            return []
        with atomic(self.db):
            return (
                self.db.query(Fixture)
                .filter(Fixture.zone_id == zone_id)
                .order_by(*store_order(Fixture.fixture_id))
                .all()
            )

    def add_fixture(self, fixture_data: FixtureCreate):
        """Create a fixture and give each of its matches a fresh ID."""
        with atomic(self.db):
            new_id = generate_custom_id(self.db, Fixture, "F", "fixture_id")
            fixture = Fixture(
                fixture_id=new_id,
                **fixture_data.model_dump(exclude={"matches"}),
            )
            self.db.add(fixture)
            fixture.matches = [
                self._build_match(match_data, position)
                for position, match_data in enumerate(fixture_data.matches)
            ]

        logger.info(f"Created fixture {fixture.fixture_id} with {len(fixture.matches)} match(es)")
        return fixture

    def update_fixture(self, fixture_id: str, patch: FixturePatch):
        """
        Merge the fields set in the patch.

        A `matches` list replaces the current one. Entries carrying the ID of a
        match already in this fixture update that match in place; any other
        entry becomes a new match. A played match stays played.
        """
        with atomic(self.db):
            fixture = self.db.get(Fixture, fixture_id)
            if not fixture:
                return None

            for key, value in patch.model_dump(exclude_none=True, exclude={"matches"}).items():
                setattr(fixture, key, value)

            if patch.matches is not None:
                existing = {match.match_id: match for match in fixture.matches}
                updated = []
                for position, match_data in enumerate(patch.matches):
                    match = existing.pop(match_data.match_id, None) if match_data.match_id else None
                    if match is None:
                        updated.append(self._build_match(match_data, position))
                        continue

                    was_played = match.played
                    for key, value in match_data.model_dump(exclude={"match_id"}, exclude_unset=True).items():
                        # A played match keeps its score
                        if was_played and value is None:
                            continue
                        setattr(match, key, value)
                    match.played = match.played or was_played
                    match.position = position
                    updated.append(match)
                fixture.matches = updated
            return fixture

    def delete_fixture(self, fixture_id: str):
        """Delete a fixture and its matches. Points already credited are kept."""
        with atomic(self.db):
            fixture = self.db.get(Fixture, fixture_id)
            if fixture:
                self.db.delete(fixture)

        if fixture:
            logger.info(f"🗑️ Deleted fixture {fixture_id}")

    def _build_match(self, match_data: MatchIn, position: int):
        return Match(
            match_id=generate_custom_id(self.db, Match, "M", "match_id"),
            position=position,
            **match_data.model_dump(exclude={"match_id"}),
        )
