from sqlalchemy import Column, String, ForeignKey, Integer, UniqueConstraint
from league_admin.core.database import Base

class Standing(Base):
    __tablename__ = "standings"
    __table_args__ = (UniqueConstraint("team_id", "zone_id", name="uq_standing_team_zone"),)

    standing_id = Column(String, primary_key=True, index=True)
    team_id = Column(String, ForeignKey("teams.team_id"), nullable=False)
    league_id = Column(String, ForeignKey("leagues.league_id"))
    category_id = Column(String, ForeignKey("categories.category_id"))
    zone_id = Column(String, ForeignKey("zones.zone_id"), index=True)

    points = Column(Integer, nullable=False, default=0)
    played = Column(Integer, nullable=False, default=0)
    won = Column(Integer, nullable=False, default=0)
    drawn = Column(Integer, nullable=False, default=0)
    lost = Column(Integer, nullable=False, default=0)
    goals_for = Column(Integer, nullable=False, default=0)
    goals_against = Column(Integer, nullable=False, default=0)
