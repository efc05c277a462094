from datetime import datetime
from typing import List, Tuple
import logging
from fastapi import HTTPException
from sqlmodel import Session, select, col, or_, and_
from app.models.product import Product
from app.models.category import Category
from app.models.product_category import ProductCategory
from app.schemas.product import ProductCreateInput

logger = logging.getLogger(__name__)

# Поля формы, где пустая строка означает "не задано"
OPTIONAL_TEXT_FIELDS = ("description", "thumbnail_url", "product_video", "product_link", "github_link")


def build_product_item(product: Product) -> dict:
    """Построить ответ продукта"""
    categories = sorted(product.categories, key=lambda c: (c.sort_order, c.id))

    return {
        "id": product.id,
        "title": product.title,
        "description": product.description,
        "thumbnail_url": product.thumbnail_url,
        "product_video": product.product_video,
        "product_link": product.product_link,
        "github_link": product.github_link,
        "category_id": product.category_id,
        "categories": [{"id": c.id, "name": c.name} for c in categories],
        "tags": list(product.tags or []),
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


def product_fields(data: ProductCreateInput) -> dict:
    """Поля продукта из формы (без categoryIds)"""
    fields = data.model_dump(exclude={"category_ids"})

    for key in OPTIONAL_TEXT_FIELDS:
        value = fields[key]
        if value is not None and not value.strip():
            fields[key] = None

    fields["tags"] = [tag.strip() for tag in fields["tags"] if tag and tag.strip()]
    return fields


def resolve_categories(db: Session, category_ids: List[int]) -> List[Category]:
    """Категории по id в порядке запроса; 400 если какой-то нет"""
    unique_ids = list(dict.fromkeys(category_ids))
    if not unique_ids:
        return []

    found = db.exec(select(Category).where(col(Category.id).in_(unique_ids))).all()
    by_id = {c.id: c for c in found}

    missing = [cid for cid in unique_ids if cid not in by_id]
    if missing:
        raise HTTPException(status_code=400, detail=f"Unknown category ids: {missing}")

    return [by_id[cid] for cid in unique_ids]


def apply_product_input(db: Session, product: Product, data: ProductCreateInput, is_new: bool) -> Product:
    """
    Заменить поля продукта данными формы.
    - categoryIds задан: полностью заменяет набор категорий
    - categoryIds не задан: при создании связываем legacy category_id,
      при обновлении связи не трогаем
    """
    fields = product_fields(data)

    if fields["category_id"] is not None:
        resolve_categories(db, [fields["category_id"]])

    for key, value in fields.items():
        setattr(product, key, value)

    if data.category_ids is not None:
        product.categories = resolve_categories(db, data.category_ids)
        if product.category_id is None and product.categories:
            product.category_id = product.categories[0].id
    elif is_new and product.category_id is not None:
        product.categories = resolve_categories(db, [product.category_id])

    product.updated_at = datetime.utcnow()
    return product


def products_in_category(db: Session, category: Category) -> List[Product]:
    """
    Продукты категории: по связям, либо по legacy category_id
    у продуктов совсем без связей
    """
    linked = select(ProductCategory.product_id).where(ProductCategory.category_id == category.id)
    any_link = select(ProductCategory.product_id)

    stmt = select(Product).where(
        or_(
            col(Product.id).in_(linked),
            and_(Product.category_id == category.id, col(Product.id).not_in(any_link)),
        )
    ).order_by(col(Product.id).desc())

    return list(db.exec(stmt).all())


def assign_products_to_category(db: Session, category: Category, product_ids: List[int]) -> Tuple[int, List[int]]:
    """
    Массово привязать продукты к категории.
    Возвращает (сколько новых связей, id которых нет в базе)
    """
    assigned = 0
    missing = []

    for product_id in product_ids:
        product = db.get(Product, product_id)
        if not product:
            missing.append(product_id)
            continue

        if category not in product.categories:
            product.categories.append(category)
            assigned += 1

        if product.category_id is None:
            product.category_id = category.id

        product.updated_at = datetime.utcnow()
        db.add(product)

    db.commit()

    if missing:
        logger.warning("Assign to %s: products not found %s", category.slug, missing)
    logger.info("Assigned %d products to category %s", assigned, category.slug)

    return assigned, missing


def detach_category(db: Session, category: Category) -> None:
    """Убрать категорию у всех продуктов перед удалением"""
    category.products = []

    legacy = db.exec(select(Product).where(Product.category_id == category.id)).all()
    for product in legacy:
        product.category_id = None
        product.updated_at = datetime.utcnow()
        db.add(product)
