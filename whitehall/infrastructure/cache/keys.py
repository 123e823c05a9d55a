"""Cache key builders. Single place for key format (DRY).

Taggable option lists are keyed by an MD5 digest of their records' update
timestamps, so editing or adding any record yields a new key and the stale
entry simply expires.
"""

import hashlib
from collections.abc import Iterable
from datetime import datetime

from whitehall.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_TAGGABLE


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator."""
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def taggable_digest(kind: str, update_timestamps: Iterable[datetime]) -> str:
    """MD5 hex digest of a taxonomy's update timestamps (whole seconds, in id order).

    Args:
        kind: Taxonomy name, e.g. "topics" or "topical-events".
        update_timestamps: updated_at of every record, ordered by id.
    """
    joined = "".join(str(int(ts.timestamp())) for ts in update_timestamps)
    return hashlib.md5(f"taggable-{kind}-{joined}".encode()).hexdigest()


def taggable_key(digest: str) -> str:
    """Cache key for a taggable option list by digest."""
    _validate_key_component(digest, "digest")
    return f"{CACHE_PREFIX_TAGGABLE}{CACHE_KEY_SEP}{digest}"
