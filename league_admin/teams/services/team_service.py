import logging
from sqlalchemy import or_
from sqlalchemy.orm import Session
from league_admin.teams.models.team_model import Team
from league_admin.teams.schemas.team_schema import TeamCreate, TeamPatch
from league_admin.zones.models.zone_model import Zone
from league_admin.matches.models.match_model import Match
from league_admin.standings.models.standings_model import Standing
from league_admin.standings.services.standing_service import StandingService
from league_admin.core.database import atomic
from league_admin.core.utils import generate_custom_id, store_order

logger = logging.getLogger(__name__)

# Team fields copied onto its standing
ANCESTOR_FIELDS = ("league_id", "category_id", "zone_id")


class TeamService:
    def __init__(self, db: Session):
        self.db = db
        self.standing_service = StandingService(db)

    def list_teams(self):
        with atomic(self.db):
            return self.db.query(Team).order_by(*store_order(Team.team_id)).all()

    def teams_of(self, zone_id: str):
        """Teams of a zone, in creation order."""
        if not zone_id:
            return []
        with atomic(self.db):
            return (
                self.db.query(Team)
                .filter(Team.zone_id == zone_id)
                .order_by(*store_order(Team.team_id))
                .all()
            )

    def add_team(self, team_data: TeamCreate):
        """Create a team and its zeroed standing in the same transaction."""
        with atomic(self.db):
            new_id = generate_custom_id(self.db, Team, "T", "team_id")
            team = Team(team_id=new_id, **team_data.model_dump())
            self.db.add(team)
            self.db.flush()

            self.standing_service.create_standing_for_team(team)

        logger.info(f"Created team {team.team_id} ({team.team_name}) in zone {team.zone_id}")
        return team

    def update_team(self, team_id: str, patch: TeamPatch):
        """
        Merge the fields set in the patch. If the team moves to another zone,
        category or league, its standing moves with it and keeps its record.
        """
        with atomic(self.db):
            team = self.db.get(Team, team_id)
            if not team:
                return None

            standing = (
                self.db.query(Standing)
                .filter(Standing.team_id == team.team_id, Standing.zone_id == team.zone_id)
                .first()
            )

            for key, value in patch.model_dump(exclude_none=True).items():
                setattr(team, key, value)

            # A new zone decides the category and league
            if patch.zone_id is not None:
                zone = self.db.get(Zone, team.zone_id)
                if zone:
                    team.category_id = zone.category_id
                    team.league_id = zone.league_id

            if standing:
                for key in ANCESTOR_FIELDS:
                    setattr(standing, key, getattr(team, key))
            return team

    def delete_team(self, team_id: str):
        """
        Delete a team, its standing, and every match it plays in.

        Fixtures are kept even when they end up with no matches.
        """
        with atomic(self.db):
            team = self.db.get(Team, team_id)

            self.db.query(Standing).filter(Standing.team_id == team_id).delete()

            matches = (
                self.db.query(Match)
                .filter(or_(Match.home_team_id == team_id, Match.away_team_id == team_id))
                .all()
            )
            for match in matches:
                # delete-orphan removes the row and keeps fixture.matches in sync
                match.fixture.matches.remove(match)
            self.db.flush()

            if team:
                self.db.delete(team)

        if team:
            logger.info(f"🗑️ Deleted team {team_id} and {len(matches)} match(es)")
