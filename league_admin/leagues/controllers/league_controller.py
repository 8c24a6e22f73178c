from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.leagues.schemas.league_schema import LeagueCreate, LeaguePatch, LeagueOut
from league_admin.leagues.services.league_service import LeagueService

router = APIRouter()


@router.post("/", response_model=LeagueOut)
def create_league(league: LeagueCreate, db: Session = Depends(get_db)):
    try:
        return LeagueService(db).add_league(league)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/", response_model=List[LeagueOut])
def list_leagues(db: Session = Depends(get_db)):
    return LeagueService(db).list_leagues()


@router.get("/{league_id}", response_model=LeagueOut)
def get_league(league_id: str, db: Session = Depends(get_db)):
    league = LeagueService(db).get_league(league_id)
    if not league:
        raise HTTPException(status_code=404, detail="League not found")
    return league


@router.patch("/{league_id}", response_model=LeagueOut)
def update_league(league_id: str, patch: LeaguePatch, db: Session = Depends(get_db)):
    try:
        league = LeagueService(db).update_league(league_id, patch)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not league:
        raise HTTPException(status_code=404, detail="League not found")
    return league
