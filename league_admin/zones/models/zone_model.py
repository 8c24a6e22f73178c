from sqlalchemy import Column, String, ForeignKey
from league_admin.core.database import Base

class Zone(Base):
    __tablename__ = "zones"

    zone_id = Column(String, primary_key=True, index=True)
    zone_name = Column(String, nullable=False)
    league_id = Column(String, ForeignKey("leagues.league_id"))
    category_id = Column(String, ForeignKey("categories.category_id"), index=True)
