from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, JSON
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from .product_category import ProductCategory

if TYPE_CHECKING:
    from .category import Category


class Product(SQLModel, table=True):
    __tablename__ = "products"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    description: Optional[str] = None
    
    thumbnail_url: Optional[str] = None
    product_video: Optional[str] = None
    product_link: Optional[str] = None
    github_link: Optional[str] = None
    
    # Устаревшая одиночная категория, основная связь через product_categories
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id")
    
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    
    # Relationships
    categories: List["Category"] = Relationship(back_populates="products", link_model=ProductCategory)
