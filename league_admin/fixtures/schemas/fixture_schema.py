from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from league_admin.matches.schemas.match_schema import MatchIn, MatchOut


class FixtureCreate(BaseModel):
    date: str
    match_date: str
    league_id: str
    category_id: str
    zone_id: str
    matches: List[MatchIn] = []


class FixturePatch(BaseModel):
    date: Optional[str] = None
    match_date: Optional[str] = None
    league_id: Optional[str] = None
    category_id: Optional[str] = None
    zone_id: Optional[str] = None
    # Replaces the whole match list when present
    matches: Optional[List[MatchIn]] = None


class FixtureOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    fixture_id: str
    date: Optional[str] = None
    match_date: Optional[str] = None
    league_id: Optional[str] = None
    category_id: Optional[str] = None
    zone_id: Optional[str] = None
    matches: List[MatchOut] = []
