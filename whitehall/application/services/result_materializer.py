"""Result materializer: provider ids -> an ordered page of editions.

The bulk fetch by id set returns rows in storage order, so results are
re-projected into the provider's ranking order before paging.

Ids the provider returns that no longer exist in the system of record
(deleted or unpublished since indexing) are compacted out of the page and
logged; the page keeps the provider's total count.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from whitehall.application.dtos.search import (
    EagerLoad,
    EditionSummary,
    ResultPage,
    SearchResultSet,
)
from whitehall.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from whitehall.application.interfaces.repositories import IEditionRepository

logger = logging.getLogger(__name__)


class ResultMaterializer:
    """Loads search hits from the edition repository and pages them."""

    def __init__(self, edition_repo: "IEditionRepository") -> None:
        self.edition_repo = edition_repo

    @traced("result_materializer.materialize")
    async def materialize(
        self,
        result_set: SearchResultSet,
        eager_load: EagerLoad,
        *,
        page: int,
        per_page: int,
    ) -> ResultPage[EditionSummary]:
        """Return the page of editions for result_set, in provider order.

        An empty result set yields an empty page without querying the repository.
        """
        if result_set.is_empty():
            return ResultPage(items=(), page=page, per_page=per_page, total_count=0)

        editions = await self.edition_repo.find_by_ids(list(result_set.ids), eager_load)
        by_id = {edition.id: edition for edition in editions}

        ordered: list[EditionSummary] = []
        missing: list[int] = []
        for edition_id in result_set.ids:
            edition = by_id.get(edition_id)
            if edition is None:
                missing.append(edition_id)
            else:
                ordered.append(edition)

        if missing:
            logger.warning(
                "Search returned %d id(s) with no matching edition; skipped: %s",
                len(missing),
                missing,
            )
            add_span_attributes(missing_count=len(missing))

        return ResultPage(
            items=tuple(ordered),
            page=page,
            per_page=per_page,
            total_count=result_set.total,
        )
