from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Coroutine, Hashable

from cachetools import TTLCache

logger = logging.getLogger(__name__)

_cache: TTLCache = TTLCache(maxsize=256, ttl=600)


def configure_cache(ttl: int) -> None:
    global _cache
    _cache = TTLCache(maxsize=256, ttl=ttl)


def cached(key_func: Callable[..., Hashable]):
    """Decorator that caches async method results under ``key_func(*args)``.

    Exceptions propagate and leave the cache untouched.
    """
    def decorator(func: Callable[..., Coroutine[Any, Any, Any]]):
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            key = (func.__qualname__, key_func(*args, **kwargs))
            if key in _cache:
                logger.debug("Cache hit: %s", key)
                return _cache[key]
            result = await func(*args, **kwargs)
            _cache[key] = result
            logger.debug("Cache set: %s", key)
            return result
        return wrapper
    return decorator


def invalidate_all() -> None:
    _cache.clear()
