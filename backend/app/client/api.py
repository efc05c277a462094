"""
Клиент Portfolio API (слой доступа к данным для админки и главной).

Все методы асинхронные, поверх httpx.AsyncClient. Ошибочные ответы
чтения и CRUD превращаются в APIError; массовая привязка к категории
возвращает bool, как и ожидает кнопка "Assign".
"""
from typing import Any, List, Optional
import logging
import httpx
from app.core.config import settings
from app.schemas.product import ProductItem, ProductCreateInput
from app.schemas.category import CategoryItem

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Неуспешный ответ API"""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    try:
        body = response.json()
        detail = body.get("detail") if isinstance(body, dict) else body
    except ValueError:
        detail = response.text
    raise APIError(response.status_code, detail)


class PortfolioAPI:
    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.API_TIMEOUT
        )

    async def __aenter__(self) -> "PortfolioAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        response = await self._client.request(method, url, **kwargs)
        _raise_for_status(response)
        return response

    # === Auth ===

    async def login(self, email: str, password: str) -> dict:
        """Логин админа; JWT cookie сохраняется в клиенте"""
        response = await self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        return response.json()

    # === Reads ===

    async def fetch_products(self) -> List[ProductItem]:
        response = await self._request("GET", "/api/products/")
        return [ProductItem.model_validate(item) for item in response.json()]

    async def fetch_product(self, product_id: int) -> ProductItem:
        response = await self._request("GET", f"/api/products/{product_id}")
        return ProductItem.model_validate(response.json())

    async def fetch_products_by_category(self, slug: str) -> List[ProductItem]:
        response = await self._request("GET", f"/api/products/category/{slug}")
        return [ProductItem.model_validate(item) for item in response.json()]

    async def fetch_products_by_category_id(self, category_id: int) -> List[ProductItem]:
        response = await self._request("GET", f"/api/products/category-id/{category_id}")
        return [ProductItem.model_validate(item) for item in response.json()]

    async def fetch_categories(self) -> List[CategoryItem]:
        response = await self._request("GET", "/api/categories/")
        return [CategoryItem.model_validate(item) for item in response.json()]

    # === Mutations ===

    async def add_product(self, payload: ProductCreateInput) -> ProductItem:
        response = await self._request(
            "POST", "/api/admin/products/",
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        )
        return ProductItem.model_validate(response.json())

    async def update_product(self, product_id: int, payload: ProductCreateInput) -> ProductItem:
        response = await self._request(
            "PUT", f"/api/admin/products/{product_id}",
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        )
        return ProductItem.model_validate(response.json())

    async def delete_product(self, product_id: int) -> None:
        await self._request("DELETE", f"/api/admin/products/{product_id}")

    async def assign_products_to_category(self, product_ids: List[int], slug: str) -> bool:
        """Привязать продукты к категории. False если API ответил ошибкой"""
        response = await self._client.post(
            f"/api/admin/categories/{slug}/assign",
            json={"product_ids": list(product_ids)}
        )
        if not response.is_success:
            logger.error("Assign to %s failed: %s %s", slug, response.status_code, response.text)
            return False
        return bool(response.json().get("success"))
