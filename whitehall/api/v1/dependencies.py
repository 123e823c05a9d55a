"""Request-scoped dependencies (composition root).

Builds repositories, the search gateway and the use-case services per
request. Shared resources (search HTTP client, cache) live on app.state
and are created by the lifespan.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from whitehall.application.services.query_composer import QueryComposer
from whitehall.application.use_cases.document_filter import DocumentFilterService
from whitehall.core.config import SearchConfig, get_settings
from whitehall.domain.value_objects.filter_criteria import FilterCriteria
from whitehall.infrastructure.cache.redis_cache import CacheService
from whitehall.infrastructure.external.search.client import HttpSearchGateway
from whitehall.infrastructure.persistence.database import get_db
from whitehall.infrastructure.persistence.repositories import (
    EditionRepository,
    TaxonomyRepository,
)
from whitehall.infrastructure.services.taggable_content import TaggableContentService


def get_search_config(request: Request) -> SearchConfig:
    """Search configuration captured at startup (falls back to current settings)."""
    config = getattr(request.app.state, "search_config", None)
    return config if config is not None else get_settings().search_config()


def query_params_to_dict(request: Request) -> dict[str, Any]:
    """Collapse repeated query keys into lists; "key[]" keys are always lists."""
    params: dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key in params:
            existing = params[key]
            params[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[key] = [value] if key.endswith("[]") else value
    return params


async def get_filter_criteria(
    request: Request,
    config: Annotated[SearchConfig, Depends(get_search_config)],
) -> FilterCriteria:
    """FilterCriteria parsed leniently from the query string."""
    return FilterCriteria.from_params(
        query_params_to_dict(request), default_per_page=config.default_per_page
    )


async def get_edition_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EditionRepository:
    return EditionRepository(db)


async def get_taxonomy_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaxonomyRepository:
    return TaxonomyRepository(db)


async def get_search_gateway(
    request: Request,
    config: Annotated[SearchConfig, Depends(get_search_config)],
) -> HttpSearchGateway:
    """Gateway over the shared httpx client created in the lifespan."""
    return HttpSearchGateway(request.app.state.search_http_client, config)


async def get_document_filter_service(
    config: Annotated[SearchConfig, Depends(get_search_config)],
    search_gateway: Annotated[HttpSearchGateway, Depends(get_search_gateway)],
    edition_repo: Annotated[EditionRepository, Depends(get_edition_repo)],
    taxonomy_repo: Annotated[TaxonomyRepository, Depends(get_taxonomy_repo)],
) -> DocumentFilterService:
    """Document filter use case (announcements, publications, policies)."""
    return DocumentFilterService(
        composer=QueryComposer(config),
        search_gateway=search_gateway,
        edition_repo=edition_repo,
        taxonomy_repo=taxonomy_repo,
    )


def get_cache(request: Request) -> CacheService | None:
    return getattr(request.app.state, "cache", None)


async def get_taggable_content_service(
    taxonomy_repo: Annotated[TaxonomyRepository, Depends(get_taxonomy_repo)],
    cache: Annotated[CacheService | None, Depends(get_cache)],
) -> TaggableContentService:
    """Taggable select options with Redis read-through (DB only when Redis is off)."""
    return TaggableContentService(
        taxonomy_repo, cache=cache, ttl=get_settings().cache_ttl_taggable
    )
