from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
import logging
from app.api.deps import get_db, admin_required
from app.models.user import User
from app.models.product import Product
from app.schemas.product import ProductItem, ProductCreateInput
from app.services.catalog import build_product_item, apply_product_input

router = APIRouter(prefix="/api/admin/products", tags=["admin-products"])

logger = logging.getLogger(__name__)


@router.post("/", response_model=ProductItem)
def create_product(
    data: ProductCreateInput,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    product = apply_product_input(db, Product(title=data.title), data, is_new=True)
    db.add(product)
    db.commit()
    db.refresh(product)
    
    logger.info("Product %s created: %s", product.id, product.title)
    return build_product_item(product)


@router.put("/{product_id}", response_model=ProductItem)
def update_product(
    product_id: int,
    data: ProductCreateInput,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    """Полная замена полей продукта"""
    product = db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    
    apply_product_input(db, product, data, is_new=False)
    db.add(product)
    db.commit()
    db.refresh(product)
    
    logger.info("Product %s updated", product.id)
    return build_product_item(product)


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(admin_required)
):
    product = db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    
    # Удаляем связи с категориями
    product.categories = []
    
    db.delete(product)
    db.commit()
    
    logger.info("Product %s deleted", product_id)
    return {"message": "Product deleted"}
