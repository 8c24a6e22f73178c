from sqlalchemy import Column, String, Boolean, ForeignKey
from league_admin.core.database import Base

class Category(Base):
    __tablename__ = "categories"

    category_id = Column(String, primary_key=True, index=True)
    category_name = Column(String, nullable=False)
    league_id = Column(String, ForeignKey("leagues.league_id"), index=True)
    is_editable = Column(Boolean, nullable=False, default=True)
