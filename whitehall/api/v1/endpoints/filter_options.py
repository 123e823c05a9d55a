"""Filter options API: the content sub-type dropdowns for the filter forms."""

from fastapi import APIRouter

from whitehall.domain.format_types import (
    ANNOUNCEMENT_FILTER_OPTIONS,
    PUBLICATION_FILTER_OPTIONS,
)
from whitehall.schemas.document_filter import FilterOptionResponse

router = APIRouter()


@router.get("/announcement-types", response_model=list[FilterOptionResponse])
def announcement_types() -> list[FilterOptionResponse]:
    return [FilterOptionResponse.from_option(o) for o in ANNOUNCEMENT_FILTER_OPTIONS]


@router.get("/publication-types", response_model=list[FilterOptionResponse])
def publication_types() -> list[FilterOptionResponse]:
    return [FilterOptionResponse.from_option(o) for o in PUBLICATION_FILTER_OPTIONS]
