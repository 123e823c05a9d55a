"""Taxonomy repository: slug lookups and taggable option rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from whitehall.application.dtos.search import TaxonomyRef
from whitehall.application.dtos.taggable import RoleAppointmentRow, TaggableRow, UpdateStamp
from whitehall.domain.enums import TaggableKind
from whitehall.infrastructure.persistence.models.role import (
    MINISTERIAL_ROLE,
    Person,
    Role,
    RoleAppointment,
)
from whitehall.infrastructure.persistence.models.taxonomy import (
    Organisation,
    Topic,
    TopicalEvent,
    WorldLocation,
)

# Kinds backed by a slugged, named table.
_NAMED_MODELS: dict[TaggableKind, type[Any]] = {
    TaggableKind.TOPICS: Topic,
    TaggableKind.TOPICAL_EVENTS: TopicalEvent,
    TaggableKind.ORGANISATIONS: Organisation,
    TaggableKind.WORLD_LOCATIONS: WorldLocation,
}

_STAMPED_MODELS: dict[TaggableKind, type[Any]] = {
    **_NAMED_MODELS,
    TaggableKind.MINISTERIAL_ROLE_APPOINTMENTS: RoleAppointment,
}


def _named_model(kind: TaggableKind) -> type[Any]:
    try:
        return _NAMED_MODELS[kind]
    except KeyError:
        raise ValueError(f"{kind.value} records have no slug or name") from None


class TaxonomyRepository:
    """Taxonomies and role appointments offered for tagging (implements ITaxonomyRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_slugs(
        self, kind: TaggableKind, slugs: Sequence[str]
    ) -> list[TaxonomyRef]:
        """Return records whose slug is in slugs, in the order the slugs were given."""
        if not slugs:
            return []
        model = _named_model(kind)
        result = await self.db.execute(select(model).where(model.slug.in_(set(slugs))))
        by_slug = {row.slug: row for row in result.scalars().all()}
        return [
            TaxonomyRef(id=by_slug[s].id, slug=s, name=by_slug[s].name)
            for s in dict.fromkeys(slugs)
            if s in by_slug
        ]

    async def update_stamps(self, kind: TaggableKind) -> list[UpdateStamp]:
        model = _STAMPED_MODELS[kind]
        result = await self.db.execute(
            select(model.id, model.updated_at).order_by(model.id)
        )
        return [UpdateStamp(id=row.id, updated_at=row.updated_at) for row in result.all()]

    async def select_rows(self, kind: TaggableKind) -> list[TaggableRow]:
        model = _named_model(kind)
        result = await self.db.execute(select(model).order_by(model.name, model.id))
        return [
            TaggableRow(id=row.id, name=row.name, acronym=getattr(row, "acronym", None))
            for row in result.scalars().all()
        ]

    async def role_appointment_rows(self) -> list[RoleAppointmentRow]:
        """Ministerial appointments, past and present, alphabetical by person."""
        stmt = (
            select(RoleAppointment)
            .join(RoleAppointment.person)
            .join(RoleAppointment.role)
            .where(Role.type == MINISTERIAL_ROLE)
            .options(
                selectinload(RoleAppointment.person),
                selectinload(RoleAppointment.role).selectinload(Role.organisations),
            )
            .order_by(Person.surname, Person.forename, RoleAppointment.id)
        )
        result = await self.db.execute(stmt)
        return [
            RoleAppointmentRow(
                id=appointment.id,
                person_name=appointment.person.name,
                role_name=appointment.role.name,
                organisation_names=tuple(o.name for o in appointment.role.organisations),
                started_at=appointment.started_at,
                ended_at=appointment.ended_at,
            )
            for appointment in result.scalars().all()
        ]
