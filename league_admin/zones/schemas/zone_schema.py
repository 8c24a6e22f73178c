from typing import Optional
from pydantic import BaseModel, ConfigDict


class ZoneCreate(BaseModel):
    zone_name: str
    league_id: str
    category_id: str


class ZonePatch(BaseModel):
    zone_name: Optional[str] = None
    league_id: Optional[str] = None
    category_id: Optional[str] = None


class ZoneOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    zone_id: str
    zone_name: str
    league_id: Optional[str] = None
    category_id: Optional[str] = None
