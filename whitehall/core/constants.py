"""Core constants: cache key prefixes and paging limits.

Single source of truth for cache key structure and page-size bounds.
"""

# Cache key prefixes
CACHE_PREFIX_TAGGABLE = "taggable"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Paging bounds for filter requests
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100
