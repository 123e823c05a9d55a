"""Search provider client (advanced search over HTTP)."""

from whitehall.infrastructure.external.search.client import (
    HttpSearchGateway,
    flatten_params,
    parse_search_response,
)

__all__ = ["HttpSearchGateway", "flatten_params", "parse_search_response"]
