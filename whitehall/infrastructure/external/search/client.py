"""HTTP client for the search provider's advanced search endpoint.

Uses a shared httpx.AsyncClient (created in the app lifespan) so requests
do not block the event loop and connections are reused. Transport errors,
timeouts and non-2xx statuses propagate as httpx exceptions; only a body
we cannot interpret is turned into SearchResponseException. No retries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from whitehall.application.dtos.search import SearchParameters, SearchResultSet
from whitehall.core.config import SearchConfig
from whitehall.domain.exceptions import SearchResponseException
from whitehall.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class _ProviderHit(BaseModel):
    id: int


class _ProviderResponse(BaseModel):
    results: list[_ProviderHit]
    total: int


def flatten_params(params: Mapping[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Encode nested parameters as Rails-style query pairs.

    {"people": ["1", "2"]} -> [("people[]", "1"), ("people[]", "2")]
    {"order": {"public_timestamp": "desc"}} -> [("order[public_timestamp]", "desc")]
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            pairs.extend(flatten_params(value, name))
        elif isinstance(value, (list, tuple)):
            pairs.extend((f"{name}[]", str(item)) for item in value)
        elif value is not None:
            pairs.append((name, str(value)))
    return pairs


def parse_search_response(response: httpx.Response) -> SearchResultSet:
    """Decode a provider response body into a SearchResultSet.

    Raises:
        SearchResponseException: Body is not JSON or lacks results/total/id.
    """
    try:
        body = response.json()
    except ValueError as e:
        raise SearchResponseException("body is not JSON") from e
    try:
        parsed = _ProviderResponse.model_validate(body)
    except ValidationError as e:
        raise SearchResponseException(
            "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        ) from e
    return SearchResultSet(ids=tuple(hit.id for hit in parsed.results), total=parsed.total)


class HttpSearchGateway:
    """Search gateway over HTTP (implements ISearchGateway)."""

    def __init__(self, http_client: httpx.AsyncClient, config: SearchConfig) -> None:
        self.http_client = http_client
        self.config = config

    @traced("search_gateway.advanced_search")
    async def advanced_search(self, params: SearchParameters) -> SearchResultSet:
        """GET {search_api_url}/{index}/advanced_search with params as the query string."""
        response = await self.http_client.get(
            self.config.advanced_search_url,
            params=flatten_params(params),
            headers={"Accept": "application/json"},
            timeout=self.config.timeout_seconds,
        )
        response.raise_for_status()
        result_set = parse_search_response(response)
        add_span_attributes(
            index=self.config.search_index,
            total=result_set.total,
            returned=len(result_set.ids),
        )
        logger.debug(
            "Search returned %d of %d hits", len(result_set.ids), result_set.total
        )
        return result_set
