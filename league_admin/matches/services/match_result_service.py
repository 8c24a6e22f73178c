import logging
from sqlalchemy.orm import Session
from league_admin.matches.models.match_model import Match
from league_admin.standings.models.standings_model import Standing
from league_admin.core.config import settings
from league_admin.core.database import atomic

logger = logging.getLogger(__name__)

HOME_WIN = "home"
AWAY_WIN = "away"
DRAW = "draw"

POINTS = {"won": 3, "drawn": 1, "lost": 0}


def classify_result(home_score: int, away_score: int) -> str:
    """0 is a real score: 0-0 is a draw and 0-2 an away win."""
    if home_score > away_score:
        return HOME_WIN
    if away_score > home_score:
        return AWAY_WIN
    return DRAW


def apply_result(standing: Standing, goals_for: int, goals_against: int, outcome: str):
    """Credit one side of a match to its standing. `outcome` is "won", "drawn" or "lost"."""
    standing.played += 1
    setattr(standing, outcome, getattr(standing, outcome) + 1)
    standing.points += POINTS[outcome]
    standing.goals_for += goals_for
    standing.goals_against += goals_against


class MatchResultService:
    def __init__(self, db: Session):
        self.db = db

    def get_match(self, match_id: str):
        with atomic(self.db):
            return self.db.get(Match, match_id)

    def record_result(self, match_id: str, home_score: int, away_score: int):
        """
        Store a match score, mark the match as played and credit both standings.

        Unknown matches are ignored. When a standing for either team is missing
        from the fixture's zone, the score is still stored but no standing moves.
        Recording the same match twice credits the standings twice unless
        RESULT_RESUBMISSION_POLICY is "reject".
        """
        with atomic(self.db):
            match = self.db.get(Match, match_id)
            if not match:
                logger.warning(f"Result for unknown match {match_id} ignored")
                return None

            if match.played and settings.RESULT_RESUBMISSION_POLICY == "reject":
                logger.warning(f"Match {match_id} already has a result, resubmission ignored")
                return match

            match.home_score = home_score
            match.away_score = away_score
            match.played = True

            zone_id = match.fixture.zone_id
            home_standing = self._standing(match.home_team_id, zone_id)
            away_standing = self._standing(match.away_team_id, zone_id)

            if not home_standing or not away_standing:
                logger.warning(f"Match {match_id}: missing standing in zone {zone_id}, standings not updated")
                return match

            if settings.LEGACY_SKIP_ZERO_SCORES and (home_score == 0 or away_score == 0):
                logger.warning(f"Match {match_id}: zero score skipped (legacy mode)")
                return match

            outcome = classify_result(home_score, away_score)
            home_outcome, away_outcome = {
                HOME_WIN: ("won", "lost"),
                AWAY_WIN: ("lost", "won"),
                DRAW: ("drawn", "drawn"),
            }[outcome]

            apply_result(home_standing, home_score, away_score, home_outcome)
            apply_result(away_standing, away_score, home_score, away_outcome)

        logger.info(f"⚽ Match {match_id} recorded {home_score}-{away_score} ({outcome})")
        return match

    def _standing(self, team_id: str, zone_id: str):
        return (
            self.db.query(Standing)
            .filter(Standing.team_id == team_id, Standing.zone_id == zone_id)
            .first()
        )
