from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.matches.schemas.match_schema import MatchOut, ResultSubmission
from league_admin.matches.services.match_result_service import MatchResultService

router = APIRouter()


@router.post("/{match_id}/result", response_model=MatchOut)
def record_match_result(match_id: str, result: ResultSubmission, db: Session = Depends(get_db)):
    """
    Record a match score and update both teams' standings.
    """
    try:
        match = MatchResultService(db).record_result(match_id, result.home_score, result.away_score)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    return match
