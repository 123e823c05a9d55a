"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from whitehall.infrastructure or whitehall.api.
"""

from whitehall.application.interfaces.repositories import (
    IEditionRepository,
    ITaxonomyRepository,
)
from whitehall.application.interfaces.services import ISearchGateway

__all__ = [
    "IEditionRepository",
    "ISearchGateway",
    "ITaxonomyRepository",
]
