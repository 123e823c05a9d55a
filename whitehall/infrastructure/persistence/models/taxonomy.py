"""Taxonomy ORM models: topics, topical events, organisations, world locations."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from whitehall.infrastructure.persistence.database import Base
from whitehall.infrastructure.persistence.models.mixins import SluggedNamedMixin


class Topic(SluggedNamedMixin, Base):
    """Policy topic. Table: topics."""

    __tablename__ = "topics"


class TopicalEvent(SluggedNamedMixin, Base):
    """Time-bound topical event (e.g. a summit). Table: topical_events."""

    __tablename__ = "topical_events"


class Organisation(SluggedNamedMixin, Base):
    """Government organisation (department, agency). Table: organisations."""

    __tablename__ = "organisations"

    acronym: Mapped[str | None] = mapped_column(String(50), nullable=True)


class WorldLocation(SluggedNamedMixin, Base):
    """Country or international delegation. Table: world_locations."""

    __tablename__ = "world_locations"
