from sqlalchemy import Column, String
from league_admin.core.database import Base

class League(Base):
    __tablename__ = "leagues"

    league_id = Column(String, primary_key=True, index=True)
    league_name = Column(String, nullable=False)
    description = Column(String)
    logo = Column(String)
