from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.standings.schemas.standing_schema import StandingOut, StandingPatch
from league_admin.standings.services.standing_service import StandingService
from league_admin.standings.services.standing_export_service import StandingExportService

router = APIRouter()


@router.get("/by-zone/{zone_id}", response_model=List[StandingOut])
def get_standings_by_zone(zone_id: str, db: Session = Depends(get_db)):
    return StandingService(db).standings_of(zone_id)


@router.get("/by-zone/{zone_id}/ranked", response_model=List[StandingOut])
def get_ranked_standings(zone_id: str, db: Session = Depends(get_db)):
    """Standings of a zone sorted for a league table."""
    return StandingService(db).standings_ranked(zone_id)


@router.get("/by-zone/{zone_id}/export-csv")
def export_standings_csv(zone_id: str, db: Session = Depends(get_db)):
    try:
        export = StandingExportService(db).export_standings_csv(zone_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not export:
        raise HTTPException(status_code=404, detail="No standings in this zone")

    filename, content = export
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.patch("/{standing_id}", response_model=StandingOut)
def update_standing(standing_id: str, patch: StandingPatch, db: Session = Depends(get_db)):
    try:
        standing = StandingService(db).update_standing(standing_id, patch)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not standing:
        raise HTTPException(status_code=404, detail="Standing not found")
    return standing
