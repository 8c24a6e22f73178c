import pandas as pd
from sqlalchemy.orm import Session
from league_admin.standings.services.standing_service import StandingService
from league_admin.standings.services.standing_ranking import goal_difference
from league_admin.teams.services.team_service import TeamService
from league_admin.zones.models.zone_model import Zone
from league_admin.core.database import atomic

UNKNOWN_TEAM = "Equipo desconocido"
CSV_COLUMNS = ["Posición", "Equipo", "PJ", "G", "E", "P", "GF", "GC", "DIF", "PTS"]


class StandingExportService:
    def __init__(self, db: Session):
        self.db = db
        self.standing_service = StandingService(db)
        self.team_service = TeamService(db)

    def standings_table(self, zone_id: str) -> pd.DataFrame:
        """Ranked standings of a zone as a table, one row per team."""
        with atomic(self.db):
            standings = self.standing_service.standings_ranked(zone_id)
            team_names = {team.team_id: team.team_name for team in self.team_service.teams_of(zone_id)}

        rows = [
            [
                position,
                team_names.get(standing.team_id, UNKNOWN_TEAM),
                standing.played,
                standing.won,
                standing.drawn,
                standing.lost,
                standing.goals_for,
                standing.goals_against,
                goal_difference(standing),
                standing.points,
            ]
            for position, standing in enumerate(standings, start=1)
        ]
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def export_standings_csv(self, zone_id: str):
        """Return (filename, csv text) for the zone's table. Empty zones give None."""
        with atomic(self.db):
            zone = self.db.get(Zone, zone_id)
            df = self.standings_table(zone_id)

        if df.empty:
            return None

        if zone:
            filename = f"posiciones_{zone.league_id}_{zone.category_id}_{zone.zone_id}.csv"
        else:
            filename = f"posiciones_{zone_id}.csv"
        return filename, df.to_csv(index=False)
