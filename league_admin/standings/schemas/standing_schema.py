from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class StandingPatch(BaseModel):
    """Manual correction of a standing. `played` and `points` are derived, never sent."""

    won: Optional[int] = Field(default=None, ge=0)
    drawn: Optional[int] = Field(default=None, ge=0)
    lost: Optional[int] = Field(default=None, ge=0)
    goals_for: Optional[int] = Field(default=None, ge=0)
    goals_against: Optional[int] = Field(default=None, ge=0)


class StandingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    standing_id: str
    team_id: str
    league_id: Optional[str] = None
    category_id: Optional[str] = None
    zone_id: Optional[str] = None
    points: int
    played: int
    won: int
    drawn: int
    lost: int
    goals_for: int
    goals_against: int
