from dataclasses import dataclass, field
from typing import List, Optional
from pydantic import BaseModel
from app.schemas.product import CategoryRef, ProductItem
from app.schemas.category import CategoryItem

PLACEHOLDER_IMAGE = "/placeholder.svg"
EMPTY_ROW_MESSAGE = "No items in this category yet"


class Project(BaseModel):
    """Статичная карточка проекта (без записи в базе)"""
    id: str
    title: str
    subtitle: str = ""
    description: str = ""
    image: str = PLACEHOLDER_IMAGE
    video_url: Optional[str] = None
    tags: List[str] = []
    product_link: Optional[str] = None
    categories: List[CategoryRef] = []
    show_title_by_default: bool = False


class DisplayItem(BaseModel):
    """Карточка в ряду, общая форма для продуктов и проектов"""
    id: str
    title: str
    subtitle: str
    description: str
    image: str
    video_url: Optional[str] = None
    tags: List[str] = []
    product_link: Optional[str] = None
    categories: List[CategoryRef] = []
    show_title_by_default: bool = False

    class Config:
        frozen = True


def display_item_from_product(item: ProductItem) -> DisplayItem:
    return DisplayItem(
        id=str(item.id),
        title=item.title,
        subtitle=item.description or "",
        description=item.description or "",
        image=item.thumbnail_url or PLACEHOLDER_IMAGE,
        video_url=item.product_video or None,
        tags=list(item.tags or []),
        product_link=item.product_link or None,
        categories=list(item.categories or []),
        show_title_by_default=True,
    )


def display_item_from_project(project: Project) -> DisplayItem:
    return DisplayItem(**project.model_dump())


def build_display_items(
    product_items: Optional[List[ProductItem]] = None,
    projects: Optional[List[Project]] = None
) -> List[DisplayItem]:
    """Продукты важнее проектов: переданный список продуктов (даже пустой) выигрывает"""
    if product_items is not None:
        return [display_item_from_product(item) for item in product_items]
    if projects is not None:
        return [display_item_from_project(project) for project in projects]
    return []


@dataclass
class ContentRow:
    title: str
    items: List[DisplayItem] = field(default_factory=list)
    category_slug: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def empty_message(self) -> Optional[str]:
        return EMPTY_ROW_MESSAGE if self.is_empty else None

    @property
    def can_assign(self) -> bool:
        """Кнопка "Assign" видна только у пустого ряда категории"""
        return self.is_empty and bool(self.category_slug)

    async def assign(self, assigner) -> bool:
        if not self.can_assign:
            return False
        return await assigner.assign(self.category_slug, self.title)


def build_content_row(
    title: str,
    product_items: Optional[List[ProductItem]] = None,
    projects: Optional[List[Project]] = None,
    category_slug: Optional[str] = None
) -> ContentRow:
    return ContentRow(
        title=title,
        items=build_display_items(product_items, projects),
        category_slug=category_slug,
    )


def category_labels(item: ProductItem, categories: Optional[List[CategoryItem]] = None) -> List[str]:
    """
    Подписи категорий в списке админки:
    categories продукта, иначе legacy category_id по справочнику
    """
    if item.categories:
        return [c.name for c in item.categories]
    if item.category_id is None or categories is None:
        return []

    for category in categories:
        if category.id == item.category_id:
            return [category.name]
    return ["Unknown"]
