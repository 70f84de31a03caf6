from typing import Optional, Callable
import logging

from aiocache import SimpleMemoryCache
from aiocache import cached as aiocache_cached

from core.config import settings

logger = logging.getLogger(__name__)

def cached(
    namespace: str,
    expire: Optional[int] = None,
    key_builder: Optional[Callable] = None
):
    """Cache decorator for async methods that respects the enabled setting.

    The TTL is looked up from ``settings.get_cache_ttl()`` by namespace when
    ``expire`` is not given. The decorated callable is assumed to be a method;
    ``self`` is left out of the cache key.
    """
    def decorator(func):
        if not settings.cache_enabled:
            return func

        ttl = expire
        if ttl is None:
            ttl = settings.get_cache_ttl().get(namespace)

        logger.debug(f"Caching {func.__qualname__} in namespace {namespace} (ttl={ttl})")
        return aiocache_cached(
            ttl=ttl,
            key_builder=key_builder,
            namespace=f"{settings.cache_prefix}:{namespace}",
            cache=SimpleMemoryCache,
            noself=True
        )(func)

    return decorator
