from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from league_admin.core.database import get_db
from league_admin.categories.schemas.category_schema import CategoryCreate, CategoryPatch, CategoryOut
from league_admin.categories.services.category_service import CategoryService

router = APIRouter()


@router.post("/", response_model=CategoryOut)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    try:
        return CategoryService(db).add_category(category)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return CategoryService(db).list_categories()


@router.get("/by-league/{league_id}", response_model=List[CategoryOut])
def get_categories_by_league(league_id: str, db: Session = Depends(get_db)):
    return CategoryService(db).categories_of(league_id)


@router.patch("/{category_id}", response_model=CategoryOut)
def update_category(category_id: str, patch: CategoryPatch, db: Session = Depends(get_db)):
    try:
        category = CategoryService(db).update_category(category_id, patch)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.delete("/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    """Delete a category with all of its zones, teams, fixtures and standings."""
    try:
        CategoryService(db).delete_category(category_id)
        return {"message": f"Category {category_id} deleted"}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
