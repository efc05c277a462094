from fastapi import APIRouter, Depends
from sqlmodel import Session, select
from typing import List
from app.api.deps import get_db
from app.models.category import Category
from app.schemas.category import CategoryItem

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("/", response_model=List[CategoryItem])
def list_categories(db: Session = Depends(get_db)):
    """Список активных категорий"""
    stmt = select(Category).where(Category.is_active == True).order_by(Category.sort_order, Category.id)
    return db.exec(stmt).all()
