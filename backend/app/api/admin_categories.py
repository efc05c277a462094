from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select, func
from app.api.deps import get_db, admin_required
from app.models.user import User
from app.models.category import Category
from app.models.product_category import ProductCategory
from app.schemas.category import (
    CategoryItem, CategoryCreate, CategoryUpdate,
    CategoryAssignRequest, CategoryAssignResponse
)
from app.services.catalog import assign_products_to_category, detach_category

router = APIRouter(prefix="/api/admin/categories", tags=["admin-categories"])


@router.get("/")
def list_categories(
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    """Все категории с количеством продуктов (админ)"""
    stmt = select(Category).order_by(Category.sort_order, Category.id)
    categories = db.exec(stmt).all()
    
    result = []
    for cat in categories:
        count_stmt = select(func.count()).select_from(ProductCategory).where(
            ProductCategory.category_id == cat.id
        )
        products_count = db.exec(count_stmt).one()
        
        result.append({
            **CategoryItem.model_validate(cat).model_dump(),
            "products_count": products_count
        })
    
    return result


@router.get("/{category_id}", response_model=CategoryItem)
def get_category(
    category_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    category = db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("/", response_model=CategoryItem)
def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    existing = db.exec(select(Category).where(Category.slug == data.slug)).first()
    if existing:
        raise HTTPException(status_code=400, detail="Slug already exists")
    
    category = Category(**data.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@router.patch("/{category_id}", response_model=CategoryItem)
def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    category = db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    
    update_data = data.model_dump(exclude_unset=True)
    
    if "slug" in update_data:
        existing = db.exec(
            select(Category).where(Category.slug == update_data["slug"], Category.id != category_id)
        ).first()
        if existing:
            raise HTTPException(status_code=400, detail="Slug already exists")
    
    for key, value in update_data.items():
        setattr(category, key, value)
    
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    category = db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    
    detach_category(db, category)
    db.delete(category)
    db.commit()
    return {"message": "Category deleted"}


# === Bulk Operations ===

@router.post("/{slug}/assign", response_model=CategoryAssignResponse)
def assign_products(
    slug: str,
    data: CategoryAssignRequest,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    """Массовая привязка продуктов к категории"""
    category = db.exec(select(Category).where(Category.slug == slug)).first()
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    
    assigned, missing = assign_products_to_category(db, category, data.product_ids)
    return CategoryAssignResponse(success=True, assigned=assigned, missing=missing)
