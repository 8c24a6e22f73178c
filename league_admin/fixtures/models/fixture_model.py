from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from league_admin.core.database import Base

class Fixture(Base):
    __tablename__ = "fixtures"

    fixture_id = Column(String, primary_key=True, index=True)
    date = Column(String)
    match_date = Column(String)
    league_id = Column(String, ForeignKey("leagues.league_id"))
    category_id = Column(String, ForeignKey("categories.category_id"))
    zone_id = Column(String, ForeignKey("zones.zone_id"), index=True)

    # Matches live and die with their fixture
    matches = relationship(
        "Match",
        back_populates="fixture",
        order_by="Match.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
