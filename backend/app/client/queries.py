from typing import List
from app.client.api import PortfolioAPI
from app.client.cache import QueryCache, QueryKey
from app.schemas.product import ProductItem
from app.schemas.category import CategoryItem

PRODUCTS_KEY: QueryKey = ("products",)
CATEGORIES_KEY: QueryKey = ("categories",)

# Что сбрасываем после создания/изменения/удаления продукта
PRODUCT_NAMESPACES: List[QueryKey] = [
    ("products",),
    ("products", "category"),
    ("products", "categoryId"),
]


def products_by_category_key(slug: str) -> QueryKey:
    return ("products", "category", slug)


def products_by_category_id_key(category_id: int) -> QueryKey:
    return ("products", "categoryId", category_id)


def invalidate_products(cache: QueryCache) -> None:
    for namespace in PRODUCT_NAMESPACES:
        cache.invalidate(namespace)


async def product_data(api: PortfolioAPI, cache: QueryCache) -> List[ProductItem]:
    return await cache.fetch(PRODUCTS_KEY, api.fetch_products)


async def category_data(api: PortfolioAPI, cache: QueryCache) -> List[CategoryItem]:
    return await cache.fetch(CATEGORIES_KEY, api.fetch_categories)


async def products_by_category(api: PortfolioAPI, cache: QueryCache, slug: str) -> List[ProductItem]:
    return await cache.fetch(
        products_by_category_key(slug),
        lambda: api.fetch_products_by_category(slug)
    )


async def products_by_category_id(api: PortfolioAPI, cache: QueryCache, category_id: int) -> List[ProductItem]:
    return await cache.fetch(
        products_by_category_id_key(category_id),
        lambda: api.fetch_products_by_category_id(category_id)
    )
