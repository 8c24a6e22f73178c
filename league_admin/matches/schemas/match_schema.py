from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class MatchIn(BaseModel):
    """A match as sent inside a fixture payload; `match_id` is only meaningful on updates."""

    match_id: Optional[str] = None
    home_team_id: str
    away_team_id: str
    home_score: Optional[int] = Field(default=None, ge=0)
    away_score: Optional[int] = Field(default=None, ge=0)
    played: bool = False

    @model_validator(mode="after")
    def teams_must_differ(self):
        if self.home_team_id == self.away_team_id:
            raise ValueError("A team cannot play against itself")
        return self


class MatchOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    match_id: str
    fixture_id: str
    home_team_id: str
    away_team_id: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    played: bool


class ResultSubmission(BaseModel):
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)
