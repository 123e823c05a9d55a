"""Application services: query composition and result materialization."""

from whitehall.application.services.query_composer import (
    QueryComposer,
    eager_load_for,
    merge_parameters,
)
from whitehall.application.services.result_materializer import ResultMaterializer

__all__ = [
    "QueryComposer",
    "ResultMaterializer",
    "eager_load_for",
    "merge_parameters",
]
