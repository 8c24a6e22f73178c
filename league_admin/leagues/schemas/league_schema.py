from typing import Optional
from pydantic import BaseModel, ConfigDict


class LeagueCreate(BaseModel):
    league_name: str
    description: Optional[str] = None
    logo: Optional[str] = None


class LeaguePatch(BaseModel):
    league_name: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None


class LeagueOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    league_id: str
    league_name: str
    description: Optional[str] = None
    logo: Optional[str] = None
