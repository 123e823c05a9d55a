"""DTOs for document filter searches (no dependency on ORM)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeAlias, TypeVar

# Association paths to prefetch with each edition, e.g. ("response", "attachments").
EagerLoad: TypeAlias = tuple[tuple[str, ...], ...]

# Provider request: facet name -> text, list of text, or nested mapping of text.
SearchParameters: TypeAlias = dict[str, Any]


@dataclass(frozen=True)
class TaxonomyRef:
    """A topic, organisation or world location resolved from its slug."""

    id: int
    slug: str
    name: str


@dataclass(frozen=True)
class ResolvedSelections:
    """Taxonomy selections after slug lookup. Empty tuple means no constraint."""

    topics: tuple[TaxonomyRef, ...] = ()
    organisations: tuple[TaxonomyRef, ...] = ()
    world_locations: tuple[TaxonomyRef, ...] = ()


@dataclass(frozen=True)
class SearchResultSet:
    """Identifiers in the provider's order plus the provider's total hit count."""

    ids: tuple[int, ...]
    total: int

    @classmethod
    def empty(cls) -> SearchResultSet:
        return cls(ids=(), total=0)

    def is_empty(self) -> bool:
        return not self.ids


@dataclass(frozen=True)
class AttachmentSummary:
    id: int
    title: str
    filename: str | None


@dataclass(frozen=True)
class EditionSummary:
    """Read-model of a published edition as listed in filter results."""

    id: int
    document_id: int
    slug: str
    edition_type: str
    title: str
    summary: str | None
    public_timestamp: datetime | None
    organisation_names: tuple[str, ...] = ()
    attachments: tuple[AttachmentSummary, ...] = ()


T = TypeVar("T")


@dataclass(frozen=True)
class ResultPage(Generic[T]):
    """One page of materialized results with enough metadata for pagination controls.

    Items are in the search provider's order, not storage order.
    """

    items: tuple[T, ...]
    page: int
    per_page: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.total_count <= 0:
            return 0
        return math.ceil(self.total_count / self.per_page)

    @property
    def is_first_page(self) -> bool:
        return self.page <= 1

    @property
    def is_last_page(self) -> bool:
        return self.page >= self.total_pages

    @property
    def next_page(self) -> int | None:
        return None if self.is_last_page else self.page + 1

    @property
    def prev_page(self) -> int | None:
        return None if self.is_first_page else self.page - 1

    def __len__(self) -> int:
        return len(self.items)
