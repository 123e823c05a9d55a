"""Taggable content API: cached select options for tagging editions."""

from typing import Annotated

from fastapi import APIRouter, Depends

from whitehall.api.v1.dependencies import get_taggable_content_service
from whitehall.domain.enums import TaggableKind
from whitehall.infrastructure.services.taggable_content import TaggableContentService
from whitehall.schemas.taggable import SelectOptionResponse, TaggableOptionsResponse

router = APIRouter()


@router.get("/{kind}", response_model=TaggableOptionsResponse)
async def taggable_options(
    kind: TaggableKind,
    taggable_svc: Annotated[TaggableContentService, Depends(get_taggable_content_service)],
):
    """Select options for one taxonomy.

    kind is topics, topical-events, organisations, world-locations or
    ministerial-role-appointments.
    """
    options = await taggable_svc.options(kind)
    return TaggableOptionsResponse(
        kind=kind.value,
        options=[SelectOptionResponse(label=o.label, value=o.value) for o in options],
    )
