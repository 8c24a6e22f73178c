from sqlalchemy import Column, String, ForeignKey
from league_admin.core.database import Base

class Team(Base):
    __tablename__ = "teams"

    team_id = Column(String, primary_key=True, index=True)
    team_name = Column(String, nullable=False)
    logo = Column(String)

    # Denormalized copies of the ancestor chain
    league_id = Column(String, ForeignKey("leagues.league_id"))
    category_id = Column(String, ForeignKey("categories.category_id"))
    zone_id = Column(String, ForeignKey("zones.zone_id"), index=True)
