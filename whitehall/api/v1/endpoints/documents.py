"""Document filter API: announcements, publications and policies.

Query parameters are read leniently (see FilterCriteria.from_params):
keywords, people[], topics[], departments[], world_locations[], date,
direction, announcement_type, publication_filter_option,
relevant_to_local_government, page, per_page.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from whitehall.api.v1.dependencies import get_document_filter_service, get_filter_criteria
from whitehall.application.use_cases.document_filter import DocumentFilterService
from whitehall.domain.value_objects.filter_criteria import FilterCriteria
from whitehall.schemas.document_filter import FilterResultsResponse

router = APIRouter()


@router.get("/announcements", response_model=FilterResultsResponse)
async def announcements(
    criteria: Annotated[FilterCriteria, Depends(get_filter_criteria)],
    filter_svc: Annotated[DocumentFilterService, Depends(get_document_filter_service)],
):
    """Filter announcements (news, speeches, statements, fatality notices)."""
    page = await filter_svc.announcements_search(criteria)
    return FilterResultsResponse.from_page(page)


@router.get("/publications", response_model=FilterResultsResponse)
async def publications(
    criteria: Annotated[FilterCriteria, Depends(get_filter_criteria)],
    filter_svc: Annotated[DocumentFilterService, Depends(get_document_filter_service)],
):
    """Filter publications, statistical data sets and consultations (with attachments)."""
    page = await filter_svc.publications_search(criteria)
    return FilterResultsResponse.from_page(page)


@router.get("/policies", response_model=FilterResultsResponse)
async def policies(
    criteria: Annotated[FilterCriteria, Depends(get_filter_criteria)],
    filter_svc: Annotated[DocumentFilterService, Depends(get_document_filter_service)],
):
    """Filter policies."""
    page = await filter_svc.policies_search(criteria)
    return FilterResultsResponse.from_page(page)
