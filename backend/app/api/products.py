from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select, col
from typing import List
from app.api.deps import get_db
from app.models.product import Product
from app.models.category import Category
from app.schemas.product import ProductItem
from app.services.catalog import build_product_item, products_in_category

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/", response_model=List[ProductItem])
def list_products(db: Session = Depends(get_db)):
    """Все продукты, новые первыми"""
    products = db.exec(select(Product).order_by(col(Product.id).desc())).all()
    return [build_product_item(p) for p in products]


@router.get("/category/{slug}", response_model=List[ProductItem])
def list_products_by_category(slug: str, db: Session = Depends(get_db)):
    """Продукты категории по slug (ряд на главной)"""
    category = db.exec(select(Category).where(Category.slug == slug)).first()
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    
    return [build_product_item(p) for p in products_in_category(db, category)]


@router.get("/category-id/{category_id}", response_model=List[ProductItem])
def list_products_by_category_id(category_id: int, db: Session = Depends(get_db)):
    category = db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    
    return [build_product_item(p) for p in products_in_category(db, category)]


@router.get("/{product_id}", response_model=ProductItem)
def get_product(product_id: int, db: Session = Depends(get_db)):
    product = db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return build_product_item(product)
