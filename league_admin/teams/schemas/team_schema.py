from typing import Optional
from pydantic import BaseModel, ConfigDict


class TeamCreate(BaseModel):
    team_name: str
    logo: Optional[str] = None
    league_id: str
    category_id: str
    zone_id: str


class TeamPatch(BaseModel):
    team_name: Optional[str] = None
    logo: Optional[str] = None
    league_id: Optional[str] = None
    category_id: Optional[str] = None
    zone_id: Optional[str] = None


class TeamOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team_id: str
    team_name: str
    logo: Optional[str] = None
    league_id: Optional[str] = None
    category_id: Optional[str] = None
    zone_id: Optional[str] = None
