"""Cached select options for tagging content with topics, organisations, etc.

Each list is cached under a digest of its records' update timestamps
(see whitehall.infrastructure.cache.keys), so a change to any record is
picked up on the next request without explicit invalidation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from whitehall.application.dtos.taggable import RoleAppointmentRow, SelectOption, TaggableRow
from whitehall.domain.enums import TaggableKind
from whitehall.infrastructure.cache.keys import taggable_digest, taggable_key

if TYPE_CHECKING:
    from whitehall.application.interfaces.repositories import ITaxonomyRepository
    from whitehall.infrastructure.cache.cache_protocol import CacheProtocol

logger = logging.getLogger(__name__)


def organisation_select_name(row: TaggableRow) -> str:
    """"Name (ACRONYM)" when the organisation has an acronym, else the name."""
    if row.acronym and row.acronym.strip():
        return f"{row.name} ({row.acronym.strip()})"
    return row.name


def to_sentence(words: Sequence[str]) -> str:
    """["a", "b", "c"] -> "a, b and c"."""
    if len(words) <= 1:
        return "".join(words)
    return f"{', '.join(words[:-1])} and {words[-1]}"


def ministerial_role_appointment_label(row: RoleAppointmentRow) -> str:
    """"Person, Role, Organisations"; past appointments add the dates the role was held."""
    role = row.role_name
    if not row.is_current:
        role += f" ({row.started_at.date().isoformat()} to {row.ended_at.date().isoformat()})"
    return ", ".join([row.person_name, role, to_sentence(row.organisation_names)])


class TaggableContentService:
    """Builds taggable select-option lists through a read-through cache.

    Request-scoped: the organisations digest is memoized for the lifetime
    of the instance, since one form renders several organisation selects.
    """

    def __init__(
        self,
        taxonomy_repo: "ITaxonomyRepository",
        cache: "CacheProtocol | None" = None,
        ttl: int = 3600,
    ) -> None:
        self.taxonomy_repo = taxonomy_repo
        self.cache = cache
        self.ttl = ttl
        self._organisations_digest: str | None = None

    async def cache_digest(self, kind: TaggableKind) -> str:
        """Digest of every record's updated_at for kind; changes whenever any record does."""
        if kind is TaggableKind.ORGANISATIONS and self._organisations_digest is not None:
            return self._organisations_digest
        stamps = await self.taxonomy_repo.update_stamps(kind)
        digest = taggable_digest(kind.value, (s.updated_at for s in stamps))
        if kind is TaggableKind.ORGANISATIONS:
            self._organisations_digest = digest
        return digest

    async def options(self, kind: TaggableKind) -> list[SelectOption]:
        """Select options for kind, ordered by name (appointments by person)."""
        if self.cache is None or not self.cache.is_available():
            return await self._build_options(kind)

        key = taggable_key(await self.cache_digest(kind))
        cached = await self.cache.get(key)
        if cached is not None:
            return [SelectOption(label=label, value=value) for label, value in cached]

        options = await self._build_options(kind)
        await self.cache.set(key, [o.as_pair() for o in options], ttl=self.ttl)
        return options

    async def _build_options(self, kind: TaggableKind) -> list[SelectOption]:
        if kind is TaggableKind.MINISTERIAL_ROLE_APPOINTMENTS:
            appointments = await self.taxonomy_repo.role_appointment_rows()
            options = [
                SelectOption(label=ministerial_role_appointment_label(a), value=a.id)
                for a in appointments
            ]
        else:
            rows = await self.taxonomy_repo.select_rows(kind)
            label = organisation_select_name if kind is TaggableKind.ORGANISATIONS else _name
            options = [SelectOption(label=label(row), value=row.id) for row in rows]
        logger.debug("Built %d taggable %s options", len(options), kind.value)
        return options

    async def taggable_topics(self) -> list[SelectOption]:
        return await self.options(TaggableKind.TOPICS)

    async def taggable_topical_events(self) -> list[SelectOption]:
        return await self.options(TaggableKind.TOPICAL_EVENTS)

    async def taggable_organisations(self) -> list[SelectOption]:
        return await self.options(TaggableKind.ORGANISATIONS)

    async def taggable_world_locations(self) -> list[SelectOption]:
        return await self.options(TaggableKind.WORLD_LOCATIONS)

    async def taggable_ministerial_role_appointments(self) -> list[SelectOption]:
        return await self.options(TaggableKind.MINISTERIAL_ROLE_APPOINTMENTS)


def _name(row: TaggableRow) -> str:
    return row.name
