from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.teams.schemas.team_schema import TeamCreate, TeamPatch, TeamOut
from league_admin.teams.services.team_service import TeamService

router = APIRouter()


@router.post("/", response_model=TeamOut)
def create_team(team: TeamCreate, db: Session = Depends(get_db)):
    """Create a team; its standing row is created with it."""
    try:
        return TeamService(db).add_team(team)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/", response_model=List[TeamOut])
def list_teams(db: Session = Depends(get_db)):
    return TeamService(db).list_teams()


@router.get("/by-zone/{zone_id}", response_model=List[TeamOut])
def get_teams_by_zone(zone_id: str, db: Session = Depends(get_db)):
    return TeamService(db).teams_of(zone_id)


@router.patch("/{team_id}", response_model=TeamOut)
def update_team(team_id: str, patch: TeamPatch, db: Session = Depends(get_db)):
    try:
        team = TeamService(db).update_team(team_id, patch)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.delete("/{team_id}")
def delete_team(team_id: str, db: Session = Depends(get_db)):
    try:
        TeamService(db).delete_team(team_id)
        return {"message": f"Team {team_id} deleted"}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
