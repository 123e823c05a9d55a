"""Persistence repositories. Re-exports for dependency injection."""

from whitehall.infrastructure.persistence.repositories.edition_repo import EditionRepository
from whitehall.infrastructure.persistence.repositories.taxonomy_repo import TaxonomyRepository

__all__ = ["EditionRepository", "TaxonomyRepository"]
