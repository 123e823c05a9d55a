"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from whitehall.api.v1.dependencies.
"""

from fastapi import APIRouter

from whitehall.api.v1.endpoints import documents, filter_options, health, taggable

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(documents.router, tags=["document-filter"])
api_router.include_router(
    filter_options.router, prefix="/filter-options", tags=["document-filter"]
)
api_router.include_router(taggable.router, prefix="/taggable", tags=["taggable"])
