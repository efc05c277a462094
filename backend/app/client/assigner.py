from typing import Dict, List, Optional
import logging
from app.client.cache import QueryCache
from app.client.notify import LogNotifier, NotificationKind
from app.client.queries import products_by_category_key

logger = logging.getLogger(__name__)

# Какие продукты кнопка "Assign" кладёт в пустой ряд категории
CATEGORY_PRODUCT_IDS: Dict[str, List[int]] = {
    "microsaas": [1, 9, 13, 14, 16],
    "nocode": [2, 3, 7, 11],
}


def product_ids_for(slug: Optional[str]) -> List[int]:
    """Список id для slug; неизвестный slug даёт пустой список"""
    if not slug:
        return []
    return list(CATEGORY_PRODUCT_IDS.get(slug, []))


class CategoryAssigner:
    """
    Массовая привязка заранее известных продуктов к категории.

    Порядок строгий: уведомление -> запрос -> (успех) уведомление и
    инвалидация ("products", "category", slug). При неудаче кеш не трогаем,
    повторов нет.
    """

    def __init__(self, api, cache: QueryCache, notifier=None):
        self.api = api
        self.cache = cache
        self.notifier = notifier or LogNotifier()

    async def assign(self, slug: Optional[str], title: str) -> bool:
        product_ids = product_ids_for(slug)
        if not product_ids:
            return False

        try:
            self.notifier.notify(
                NotificationKind.INFO,
                "Assigning products",
                f"Assigning products to {title} category..."
            )
            success = await self.api.assign_products_to_category(product_ids, slug)
        except Exception:
            logger.exception("Error assigning products to %s", slug)
            self.notifier.notify(
                NotificationKind.ERROR,
                "Error",
                "Failed to assign products to category"
            )
            return False

        if not success:
            self.notifier.notify(
                NotificationKind.ERROR,
                "Error",
                f"Failed to assign products to {title} category"
            )
            return False

        self.notifier.notify(
            NotificationKind.SUCCESS,
            "Success",
            f"Products assigned to {title} category successfully!"
        )
        self.cache.invalidate(products_by_category_key(slug))
        return True
