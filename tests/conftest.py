import pytest
from fastapi.testclient import TestClient
from league_admin.core.database import Base, SessionLocal, engine, init_db
from league_admin.leagues.schemas.league_schema import LeagueCreate
from league_admin.leagues.services.league_service import LeagueService
from league_admin.categories.schemas.category_schema import CategoryCreate
from league_admin.categories.services.category_service import CategoryService
from league_admin.zones.schemas.zone_schema import ZoneCreate
from league_admin.zones.services.zone_service import ZoneService
from league_admin.teams.schemas.team_schema import TeamCreate
from league_admin.teams.services.team_service import TeamService
from league_admin.fixtures.schemas.fixture_schema import FixtureCreate
from league_admin.fixtures.services.fixture_service import FixtureService
from league_admin.matches.schemas.match_schema import MatchIn


@pytest.fixture
def db():
    """A session over a freshly created schema, dropped after the test."""
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    from league_admin.main import app

    with TestClient(app) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=engine)


class LeagueBuilder:
    """Shortcuts for building a league tree in tests."""

    def __init__(self, db):
        self.db = db

    def league(self, name="Liga Regional"):
        return LeagueService(self.db).add_league(LeagueCreate(league_name=name))

    def category(self, league, name="Sub-15"):
        return CategoryService(self.db).add_category(
            CategoryCreate(category_name=name, league_id=league.league_id)
        )

    def zone(self, category, name="Zona A"):
        return ZoneService(self.db).add_zone(
            ZoneCreate(zone_name=name, league_id=category.league_id, category_id=category.category_id)
        )

    def team(self, zone, name):
        return TeamService(self.db).add_team(
            TeamCreate(
                team_name=name,
                league_id=zone.league_id,
                category_id=zone.category_id,
                zone_id=zone.zone_id,
            )
        )

    def fixture(self, zone, pairs, date="2024-03-02"):
        return FixtureService(self.db).add_fixture(
            FixtureCreate(
                date=date,
                match_date=date,
                league_id=zone.league_id,
                category_id=zone.category_id,
                zone_id=zone.zone_id,
                matches=[
                    MatchIn(home_team_id=home.team_id, away_team_id=away.team_id)
                    for home, away in pairs
                ],
            )
        )


@pytest.fixture
def build(db):
    return LeagueBuilder(db)


@pytest.fixture
def zone(build):
    league = build.league()
    category = build.category(league)
    return build.zone(category)
