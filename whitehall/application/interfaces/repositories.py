"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs and domain enums only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from whitehall.domain.enums import TaggableKind

if TYPE_CHECKING:
    from whitehall.application.dtos.search import EagerLoad, EditionSummary, TaxonomyRef
    from whitehall.application.dtos.taggable import (
        RoleAppointmentRow,
        TaggableRow,
        UpdateStamp,
    )


# Edition repository interface (system of record for search hits)
class IEditionRepository(Protocol):
    """Protocol for bulk-loading editions by id."""

    async def find_by_ids(
        self, ids: Sequence[int], eager_load: EagerLoad
    ) -> list[EditionSummary]:
        """Return editions whose id is in ids, in no particular order, in a single query.

        Ids with no matching edition are simply absent from the result.
        """


# Taxonomy repository interface (topics, organisations, world locations, topical events,
# ministerial role appointments)
class ITaxonomyRepository(Protocol):
    """Protocol for taxonomy lookups used by the filter and the taggable option lists."""

    async def find_by_slugs(
        self, kind: TaggableKind, slugs: Sequence[str]
    ) -> list[TaxonomyRef]:
        """Return records of kind whose slug is in slugs. Unknown slugs are skipped."""

    async def update_stamps(self, kind: TaggableKind) -> list[UpdateStamp]:
        """Return (id, updated_at) for every record of kind, ordered by id."""

    async def select_rows(self, kind: TaggableKind) -> list[TaggableRow]:
        """Return every record of kind ordered by name."""

    async def role_appointment_rows(self) -> list[RoleAppointmentRow]:
        """Return every ministerial role appointment, past and present, ordered by person."""
