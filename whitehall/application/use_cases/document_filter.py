"""Document filter use case: announcements, publications and policies searches.

Resolves taxonomy slugs, composes provider parameters, runs the search and
materializes the hits. Search provider failures are not caught here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from whitehall.application.dtos.search import (
    EditionSummary,
    ResolvedSelections,
    ResultPage,
    TaxonomyRef,
)
from whitehall.application.services.query_composer import QueryComposer, eager_load_for
from whitehall.application.services.result_materializer import ResultMaterializer
from whitehall.domain.enums import SearchType, TaggableKind
from whitehall.domain.value_objects.filter_criteria import FilterCriteria

if TYPE_CHECKING:
    from whitehall.application.interfaces.repositories import (
        IEditionRepository,
        ITaxonomyRepository,
    )
    from whitehall.application.interfaces.services import ISearchGateway

logger = logging.getLogger(__name__)


class DocumentFilterService:
    """Faceted document search over the external provider (request-scoped)."""

    def __init__(
        self,
        composer: QueryComposer,
        search_gateway: "ISearchGateway",
        edition_repo: "IEditionRepository",
        taxonomy_repo: "ITaxonomyRepository",
    ) -> None:
        self.composer = composer
        self.search_gateway = search_gateway
        self.taxonomy_repo = taxonomy_repo
        self.materializer = ResultMaterializer(edition_repo)

    async def resolve_selections(self, criteria: FilterCriteria) -> ResolvedSelections:
        """Look up selected topic, organisation and location slugs (one query each)."""

        async def lookup(
            kind: TaggableKind, slugs: tuple[str, ...]
        ) -> tuple[TaxonomyRef, ...]:
            if not slugs:
                return ()
            return tuple(await self.taxonomy_repo.find_by_slugs(kind, slugs))

        return ResolvedSelections(
            topics=await lookup(TaggableKind.TOPICS, criteria.topics),
            organisations=await lookup(TaggableKind.ORGANISATIONS, criteria.organisations),
            world_locations=await lookup(
                TaggableKind.WORLD_LOCATIONS, criteria.world_locations
            ),
        )

    async def search(
        self, search_type: SearchType, criteria: FilterCriteria
    ) -> ResultPage[EditionSummary]:
        """Run one search of search_type and return the requested page."""
        selections = await self.resolve_selections(criteria)
        params = self.composer.compose(criteria, search_type, selections)
        logger.debug("%s search parameters: %s", search_type.value, params)
        result_set = await self.search_gateway.advanced_search(params)
        return await self.materializer.materialize(
            result_set,
            eager_load_for(search_type),
            page=criteria.page,
            per_page=criteria.per_page,
        )

    async def announcements_search(
        self, criteria: FilterCriteria
    ) -> ResultPage[EditionSummary]:
        return await self.search(SearchType.ANNOUNCEMENTS, criteria)

    async def publications_search(
        self, criteria: FilterCriteria
    ) -> ResultPage[EditionSummary]:
        return await self.search(SearchType.PUBLICATIONS, criteria)

    async def policies_search(self, criteria: FilterCriteria) -> ResultPage[EditionSummary]:
        return await self.search(SearchType.POLICIES, criteria)
