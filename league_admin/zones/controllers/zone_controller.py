from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.zones.schemas.zone_schema import ZoneCreate, ZonePatch, ZoneOut
from league_admin.zones.services.zone_service import ZoneService

router = APIRouter()


@router.post("/", response_model=ZoneOut)
def create_zone(zone: ZoneCreate, db: Session = Depends(get_db)):
    try:
        return ZoneService(db).add_zone(zone)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/", response_model=List[ZoneOut])
def list_zones(db: Session = Depends(get_db)):
    return ZoneService(db).list_zones()


@router.get("/by-category/{category_id}", response_model=List[ZoneOut])
def get_zones_by_category(category_id: str, db: Session = Depends(get_db)):
    return ZoneService(db).zones_of(category_id)


@router.patch("/{zone_id}", response_model=ZoneOut)
def update_zone(zone_id: str, patch: ZonePatch, db: Session = Depends(get_db)):
    try:
        zone = ZoneService(db).update_zone(zone_id, patch)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not zone:
        raise HTTPException(status_code=404, detail="Zone not found")
    return zone


@router.delete("/{zone_id}")
def delete_zone(zone_id: str, db: Session = Depends(get_db)):
    """Delete a zone with its teams, fixtures and standings."""
    try:
        ZoneService(db).delete_zone(zone_id)
        return {"message": f"Zone {zone_id} deleted"}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
