"""Thread-safe TTL cache for public dropdown options and site settings.

The public forms read these tables on every page load while admins edit them
rarely. Entries expire after ``OPTIONS_CACHE_TTL`` seconds and every admin
write clears the whole cache. Each uvicorn worker keeps its own instance.
"""

import logging
import threading
from functools import lru_cache
from typing import Any, Callable

from cachetools import TTLCache

from ..core.config import get_settings

logger = logging.getLogger(__name__)


class OptionsCache:
    """TTL cache keyed by configuration table name."""

    def __init__(self, maxsize: int = 16, ttl: int = 300) -> None:
        self._cache: TTLCache[str, Any] = TTLCache(maxsize=maxsize, ttl=ttl)
        self._lock = threading.Lock()

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value, calling ``loader`` on a miss.

        The loader runs outside the lock; a failing loader caches nothing.
        """
        with self._lock:
            if key in self._cache:
                return self._cache[key]
        value = loader()
        with self._lock:
            self._cache[key] = value
        logger.debug("Options cache set: %s", key)
        return value

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.debug("Options cache cleared")


@lru_cache
def get_options_cache() -> OptionsCache:
    return OptionsCache(ttl=get_settings().options_cache_ttl)
