"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IdMixin, TimestampMixin, and SluggedNamedMixin for taxonomies.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class IdMixin:
    """Integer autoincrement primary key (ids are what the search index stores)."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class SluggedNamedMixin(IdMixin, TimestampMixin):
    """Taxonomy record: unique slug used by filter forms and a display name."""

    @declared_attr
    def slug(cls) -> Mapped[str]:
        return mapped_column(String(255), nullable=False, unique=True, index=True)

    @declared_attr
    def name(cls) -> Mapped[str]:
        return mapped_column(String(255), nullable=False, index=True)
