from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from league_admin.core.database import Base

class Match(Base):
    __tablename__ = "matches"

    match_id = Column(String, primary_key=True, index=True)
    fixture_id = Column(String, ForeignKey("fixtures.fixture_id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    home_team_id = Column(String, ForeignKey("teams.team_id"), nullable=False)
    away_team_id = Column(String, ForeignKey("teams.team_id"), nullable=False)
    home_score = Column(Integer)
    away_score = Column(Integer)
    played = Column(Boolean, nullable=False, default=False)

    fixture = relationship("Fixture", back_populates="matches")
