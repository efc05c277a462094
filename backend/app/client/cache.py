from collections import Counter
from typing import Any, Awaitable, Callable, Dict, Hashable, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

QueryKey = Tuple[Hashable, ...]


def _as_key(key) -> QueryKey:
    # Ключи только кортежи: строка "products" не должна совпадать с ("p", ...)
    if not isinstance(key, tuple):
        raise TypeError(f"Query key must be a tuple, got {type(key).__name__}")
    return key


class QueryCache:
    """Кеш запросов с инвалидацией по префиксу ключа"""

    def __init__(self):
        self._entries: Dict[QueryKey, Any] = {}
        # Ключи, которые сейчас грузятся, и номер их инвалидации
        self._loading: Counter = Counter()
        self._generations: Dict[QueryKey, int] = {}

    def get(self, key: QueryKey, default: Optional[Any] = None) -> Any:
        return self._entries.get(_as_key(key), default)

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[_as_key(key)] = value

    def __contains__(self, key) -> bool:
        return isinstance(key, tuple) and key in self._entries

    def keys(self) -> List[QueryKey]:
        return list(self._entries)

    async def fetch(self, key: QueryKey, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Вернуть закешированное значение или загрузить и сохранить"""
        key = _as_key(key)
        if key in self._entries:
            return self._entries[key]

        generation = self._generations.get(key, 0)
        self._loading[key] += 1
        try:
            value = await loader()
        finally:
            self._loading[key] -= 1
            if not self._loading[key]:
                del self._loading[key]

        # Сброс во время загрузки: результат устарел, в кеш не кладём
        if self._generations.get(key, 0) == generation:
            self._entries[key] = value
        return value

    def invalidate(self, prefix: QueryKey) -> int:
        """Сбросить все ключи, начинающиеся с prefix. Возвращает число удалённых"""
        prefix = _as_key(prefix)
        size = len(prefix)
        stale = [key for key in self._entries if key[:size] == prefix]

        for key in stale:
            del self._entries[key]

        for key in self._loading:
            if key[:size] == prefix:
                self._generations[key] = self._generations.get(key, 0) + 1

        logger.debug("Invalidated %d queries under %r", len(stale), prefix)
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
        for key in self._loading:
            self._generations[key] = self._generations.get(key, 0) + 1
