"""Application DTOs: plain dataclasses passed between layers (no ORM types)."""

from whitehall.application.dtos.search import (
    AttachmentSummary,
    EagerLoad,
    EditionSummary,
    ResolvedSelections,
    ResultPage,
    SearchParameters,
    SearchResultSet,
    TaxonomyRef,
)
from whitehall.application.dtos.taggable import (
    RoleAppointmentRow,
    SelectOption,
    TaggableRow,
    UpdateStamp,
)

__all__ = [
    "AttachmentSummary",
    "EagerLoad",
    "EditionSummary",
    "ResolvedSelections",
    "ResultPage",
    "RoleAppointmentRow",
    "SearchParameters",
    "SearchResultSet",
    "SelectOption",
    "TaggableRow",
    "TaxonomyRef",
    "UpdateStamp",
]
