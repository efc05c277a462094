from pydantic import BaseModel
from typing import Optional, List


class CategoryItem(BaseModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True

    class Config:
        from_attributes = True


class CategoryCreate(BaseModel):
    name: str
    slug: str
    description: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


# Bulk operations
class CategoryAssignRequest(BaseModel):
    product_ids: List[int]


class CategoryAssignResponse(BaseModel):
    success: bool
    assigned: int
    missing: List[int] = []
