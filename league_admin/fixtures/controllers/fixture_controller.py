from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.fixtures.schemas.fixture_schema import FixtureCreate, FixturePatch, FixtureOut
from league_admin.fixtures.services.fixture_service import FixtureService

router = APIRouter()


@router.post("/", response_model=FixtureOut)
def create_fixture(fixture: FixtureCreate, db: Session = Depends(get_db)):
    try:
        return FixtureService(db).add_fixture(fixture)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/", response_model=List[FixtureOut])
def list_fixtures(db: Session = Depends(get_db)):
    return FixtureService(db).list_fixtures()


@router.get("/by-zone/{zone_id}", response_model=List[FixtureOut])
def get_fixtures_by_zone(zone_id: str, db: Session = Depends(get_db)):
    return FixtureService(db).fixtures_of(zone_id)


@router.patch("/{fixture_id}", response_model=FixtureOut)
def update_fixture(fixture_id: str, patch: FixturePatch, db: Session = Depends(get_db)):
    try:
        fixture = FixtureService(db).update_fixture(fixture_id, patch)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not fixture:
        raise HTTPException(status_code=404, detail="Fixture not found")
    return fixture


@router.delete("/{fixture_id}")
def delete_fixture(fixture_id: str, db: Session = Depends(get_db)):
    try:
        FixtureService(db).delete_fixture(fixture_id)
        return {"message": f"Fixture {fixture_id} deleted"}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
