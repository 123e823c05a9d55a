"""Cache: Redis service and cache key utilities.

Used for taggable select-option lists. CacheService uses whitehall.core.config;
key format is in keys.py (DRY).
"""

from whitehall.infrastructure.cache.cache_protocol import CacheProtocol
from whitehall.infrastructure.cache.keys import taggable_digest, taggable_key
from whitehall.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "taggable_digest",
    "taggable_key",
]
