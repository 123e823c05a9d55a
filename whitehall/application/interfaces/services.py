"""Service interfaces (ports) for the application layer.

Protocols define contracts for outbound services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from whitehall.application.dtos.search import SearchParameters, SearchResultSet


class ISearchGateway(Protocol):
    """Protocol for the external full-text/faceted search provider.

    Transport failures propagate to the caller; implementations do not retry.
    """

    async def advanced_search(self, params: SearchParameters) -> SearchResultSet:
        """Run a faceted search and return ordered ids plus the total hit count."""

