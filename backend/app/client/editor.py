"""
Состояние формы админки продуктов.

IDLE - форма пустая, submit создаёт продукт.
EDITING - форма заполнена из выбранного продукта, submit его заменяет.
Ошибки API логируются и глотаются: форма остаётся как была.
"""
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Callable, List, Optional
import logging
from app.client.cache import QueryCache
from app.client.queries import invalidate_products
from app.schemas.product import ProductItem, ProductCreateInput

logger = logging.getLogger(__name__)

TAGS_SEPARATOR = ", "


class EditorState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass
class ProductForm:
    title: str = ""
    description: str = ""
    thumbnail_url: str = ""
    product_video: str = ""
    product_link: str = ""
    github_link: str = ""
    category_id: Optional[int] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_item(cls, item: ProductItem) -> "ProductForm":
        return cls(
            title=item.title,
            description=item.description or "",
            thumbnail_url=item.thumbnail_url or "",
            product_video=item.product_video or "",
            product_link=item.product_link or "",
            github_link=item.github_link or "",
            category_id=item.category_id,
            tags=list(item.tags or []),
        )


FORM_FIELDS = tuple(f.name for f in fields(ProductForm) if f.name != "tags")


def parse_tags(text: str) -> List[str]:
    """'a, b ,, c' -> ['a', 'b', 'c']"""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def seed_categories(item: ProductItem) -> List[int]:
    """Выбранные категории для продукта: categories, иначе legacy category_id"""
    if item.categories:
        return [c.id for c in item.categories]
    if item.category_id is not None:
        return [item.category_id]
    return []


def _confirm_delete(product_id: int) -> bool:
    return False


class ProductEditor:
    def __init__(self, api, cache: QueryCache, confirm: Optional[Callable[[int], bool]] = None):
        self.api = api
        self.cache = cache
        # Блокирующее "Are you sure?"; без UI удаление всегда отклоняется
        self.confirm = confirm or _confirm_delete

        self.editing_item: Optional[ProductItem] = None
        self.form = ProductForm()
        self.selected_categories: List[int] = []
        self.tags_input = ""
        self._busy = False

    @property
    def state(self) -> EditorState:
        return EditorState.EDITING if self.editing_item is not None else EditorState.IDLE

    @property
    def is_busy(self) -> bool:
        return self._busy

    # === Transitions ===

    def start_edit(self, item: ProductItem) -> None:
        """Заполнить форму, категории и теги из продукта одним шагом"""
        self.editing_item = item
        self.form = ProductForm.from_item(item)
        self.selected_categories = seed_categories(item)
        self.tags_input = TAGS_SEPARATOR.join(item.tags or [])

    def cancel_edit(self) -> None:
        self._reset()

    def toggle_category(self, category_id: int) -> None:
        if category_id in self.selected_categories:
            self.selected_categories = [cid for cid in self.selected_categories if cid != category_id]
        else:
            self.selected_categories = self.selected_categories + [category_id]

    def edit_tags_text(self, text: str) -> List[str]:
        self.tags_input = text
        self.form.tags = parse_tags(text)
        return self.form.tags

    def set_field(self, name: str, value) -> None:
        if name not in FORM_FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        self.form = replace(self.form, **{name: value})

    def build_payload(self) -> ProductCreateInput:
        data = {name: getattr(self.form, name) for name in FORM_FIELDS}
        return ProductCreateInput(
            **data,
            tags=list(self.form.tags or []),
            category_ids=list(self.selected_categories) if self.selected_categories else None,
        )

    async def submit(self) -> bool:
        if self._busy:
            logger.warning("Submit ignored: another product request is in flight")
            return False

        self._busy = True
        try:
            payload = self.build_payload()
            if self.editing_item is not None:
                await self.api.update_product(self.editing_item.id, payload)
            else:
                await self.api.add_product(payload)
        except Exception:
            logger.exception("Error saving product item")
            return False
        finally:
            self._busy = False

        invalidate_products(self.cache)
        self._reset()
        return True

    async def delete_item(self, product_id: int) -> bool:
        if self._busy:
            logger.warning("Delete of %s ignored: another product request is in flight", product_id)
            return False

        if not self.confirm(product_id):
            return False

        self._busy = True
        try:
            await self.api.delete_product(product_id)
        except Exception:
            logger.exception("Error deleting product item %s", product_id)
            return False
        finally:
            self._busy = False

        invalidate_products(self.cache)
        return True

    def _reset(self) -> None:
        self.editing_item = None
        self.selected_categories = []
        self.form = ProductForm()
        self.tags_input = ""
