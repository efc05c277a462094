from .user import User, UserRole
from .product_category import ProductCategory
from .category import Category
from .product import Product

__all__ = [
    "User", "UserRole",
    "ProductCategory",
    "Category",
    "Product",
]
