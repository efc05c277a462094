from .category import CategoryItem, CategoryCreate, CategoryUpdate
from .product import CategoryRef, ProductItem, ProductCreateInput

__all__ = [
    "CategoryItem", "CategoryCreate", "CategoryUpdate",
    "CategoryRef", "ProductItem", "ProductCreateInput",
]
