"""Infrastructure services backed by the cache and repositories."""

from whitehall.infrastructure.services.taggable_content import TaggableContentService

__all__ = ["TaggableContentService"]
