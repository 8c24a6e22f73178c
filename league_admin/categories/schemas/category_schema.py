from typing import Optional
from pydantic import BaseModel, ConfigDict


class CategoryCreate(BaseModel):
    category_name: str
    league_id: str
    is_editable: bool = True


class CategoryPatch(BaseModel):
    category_name: Optional[str] = None
    league_id: Optional[str] = None
    is_editable: Optional[bool] = None


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category_id: str
    category_name: str
    league_id: Optional[str] = None
    is_editable: bool
