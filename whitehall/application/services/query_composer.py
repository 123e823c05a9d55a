"""Query composer: FilterCriteria -> search provider parameters.

Each facet is built by its own function returning a sub-map (empty when the
criterion is absent). The sub-maps are merged into one SearchParameters
mapping; keys never overlap, and a collision is a programming error.
All leaf values are text, as the provider expects.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from whitehall.application.dtos.search import (
    EagerLoad,
    ResolvedSelections,
    SearchParameters,
)
from whitehall.core.config import SearchConfig
from whitehall.domain.enums import Direction, SearchType
from whitehall.domain.format_types import (
    DEFAULT_ANNOUNCEMENT_FORMAT_TYPES,
    DEFAULT_PUBLICATION_FORMAT_TYPES,
    POLICY_FORMAT_TYPES,
    find_announcement_option,
    find_publication_option,
)
from whitehall.domain.value_objects.filter_criteria import FilterCriteria

BASE_EAGER_LOAD: EagerLoad = (("document",), ("organisations",))
PUBLICATION_EAGER_LOAD: EagerLoad = BASE_EAGER_LOAD + (
    ("attachments",),
    ("response", "attachments"),
)

_EMPTY_SELECTIONS = ResolvedSelections()


def merge_parameters(*parts: Mapping[str, Any]) -> SearchParameters:
    """Merge facet sub-maps into one mapping.

    Raises:
        ValueError: If two sub-maps define the same key.
    """
    merged: SearchParameters = {}
    for part in parts:
        overlap = merged.keys() & part.keys()
        if overlap:
            raise ValueError(f"Search parameter defined twice: {sorted(overlap)}")
        merged.update(part)
    return merged


def eager_load_for(search_type: SearchType) -> EagerLoad:
    """Associations to prefetch for editions returned by this search type."""
    if search_type is SearchType.PUBLICATIONS:
        return PUBLICATION_EAGER_LOAD
    return BASE_EAGER_LOAD


def pagination(criteria: FilterCriteria) -> dict[str, Any]:
    return {"page": str(criteria.page), "per_page": str(criteria.per_page)}


def keywords(criteria: FilterCriteria) -> dict[str, Any]:
    if criteria.has_keywords:
        return {"keywords": str(criteria.keywords)}
    return {}


def relevance_to_local_government(
    criteria: FilterCriteria, default: bool
) -> dict[str, Any]:
    relevant = criteria.relevant_to_local_government
    if relevant is None:
        relevant = default
    return {"relevant_to_local_government": str(relevant).lower()}


def people(criteria: FilterCriteria) -> dict[str, Any]:
    if criteria.people and not criteria.selects_all_people:
        return {"people": [str(p) for p in criteria.people]}
    return {}


def topics(selections: ResolvedSelections) -> dict[str, Any]:
    if selections.topics:
        return {"topics": [str(t.id) for t in selections.topics]}
    return {}


def organisations(selections: ResolvedSelections) -> dict[str, Any]:
    if selections.organisations:
        return {"organisations": [str(o.id) for o in selections.organisations]}
    return {}


def world_locations(selections: ResolvedSelections) -> dict[str, Any]:
    # Locations are matched by slug in the index.
    if selections.world_locations:
        return {"world_locations": [loc.slug for loc in selections.world_locations]}
    return {}


def date_range(criteria: FilterCriteria) -> dict[str, Any]:
    """Public timestamp bound. "before" excludes the given day itself."""
    if criteria.date is None or not criteria.direction:
        return {}
    if criteria.direction == Direction.BEFORE.value:
        try:
            bound = criteria.date - timedelta(days=1)
        except OverflowError:
            # Nothing precedes date.min; the bound is dropped like any unusable date.
            return {}
        return {"public_timestamp": {"before": bound.isoformat()}}
    if criteria.direction == Direction.AFTER.value:
        return {"public_timestamp": {"after": criteria.date.isoformat()}}
    return {}


def sort_order(criteria: FilterCriteria) -> dict[str, Any]:
    """Chronological order, unless keywords are present (keep relevance ranking)."""
    if not criteria.direction or criteria.has_keywords:
        return {}
    if criteria.direction == Direction.BEFORE.value:
        return {"order": {"public_timestamp": "desc"}}
    if criteria.direction == Direction.AFTER.value:
        return {"order": {"public_timestamp": "asc"}}
    return {}


def format_types(criteria: FilterCriteria, search_type: SearchType) -> dict[str, Any]:
    if search_type is SearchType.ANNOUNCEMENTS:
        option = find_announcement_option(criteria.announcement_type)
        codes = option.search_format_types if option else DEFAULT_ANNOUNCEMENT_FORMAT_TYPES
    elif search_type is SearchType.PUBLICATIONS:
        option = find_publication_option(criteria.publication_type)
        codes = option.search_format_types if option else DEFAULT_PUBLICATION_FORMAT_TYPES
    else:
        codes = POLICY_FORMAT_TYPES
    return {"search_format_types": list(codes)}


class QueryComposer:
    """Builds provider parameters for announcements, publications and policies searches.

    Stateless apart from its configuration, so one instance may be shared
    between concurrent requests.
    """

    def __init__(self, config: SearchConfig) -> None:
        self.config = config

    def standard_parameters(
        self,
        criteria: FilterCriteria,
        selections: ResolvedSelections = _EMPTY_SELECTIONS,
    ) -> SearchParameters:
        """Facets shared by every search type (everything except format types)."""
        return merge_parameters(
            pagination(criteria),
            keywords(criteria),
            relevance_to_local_government(
                criteria, self.config.relevant_to_local_government
            ),
            people(criteria),
            topics(selections),
            organisations(selections),
            world_locations(selections),
            date_range(criteria),
            sort_order(criteria),
        )

    def compose(
        self,
        criteria: FilterCriteria,
        search_type: SearchType,
        selections: ResolvedSelections = _EMPTY_SELECTIONS,
    ) -> SearchParameters:
        """Full parameter map for one search type."""
        return merge_parameters(
            self.standard_parameters(criteria, selections),
            format_types(criteria, search_type),
        )
