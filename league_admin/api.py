from fastapi import APIRouter
from league_admin.leagues.controllers.league_controller import router as league_router
from league_admin.categories.controllers.category_controller import router as category_router
from league_admin.zones.controllers.zone_controller import router as zone_router
from league_admin.teams.controllers.team_controller import router as team_router
from league_admin.fixtures.controllers.fixture_controller import router as fixture_router
from league_admin.matches.controllers.match_result_controller import router as match_result_router
from league_admin.standings.controllers.standings_controller import router as standings_router

api_router = APIRouter()

api_router.include_router(league_router, prefix="/leagues", tags=["leagues"])
api_router.include_router(category_router, prefix="/categories", tags=["categories"])
api_router.include_router(zone_router, prefix="/zones", tags=["zones"])
api_router.include_router(team_router, prefix="/teams", tags=["teams"])
api_router.include_router(fixture_router, prefix="/fixtures", tags=["fixtures"])
api_router.include_router(match_result_router, prefix="/matches", tags=["matches"])
api_router.include_router(standings_router, prefix="/standings", tags=["standings"])
