from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class CategoryRef(BaseModel):
    """Категория внутри карточки продукта"""
    id: int
    name: str

    class Config:
        from_attributes = True


class ProductItem(BaseModel):
    """Продукт портфолио, как его отдаёт API"""
    id: int
    title: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    product_video: Optional[str] = None
    product_link: Optional[str] = None
    github_link: Optional[str] = None
    
    # Если categories не пустой, он важнее category_id
    category_id: Optional[int] = None
    categories: List[CategoryRef] = []
    tags: List[str] = []
    
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProductCreateInput(BaseModel):
    """Полная форма продукта: используется и для создания, и для замены"""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    product_video: Optional[str] = None
    product_link: Optional[str] = None
    github_link: Optional[str] = None
    category_id: Optional[int] = None
    tags: List[str] = []
    
    # Только на запись: мульти-категории
    category_ids: Optional[List[int]] = Field(default=None, alias="categoryIds")

    class Config:
        populate_by_name = True
