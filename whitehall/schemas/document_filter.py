"""Document filter API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from whitehall.application.dtos.search import EditionSummary, ResultPage
from whitehall.domain.format_types import FilterOption


class AttachmentResponse(BaseModel):
    id: int
    title: str
    filename: str | None = None


class EditionResponse(BaseModel):
    """One edition in a filter results page."""

    id: int
    document_id: int
    slug: str
    type: str = Field(..., description="Edition type, e.g. NewsArticle, Publication")
    title: str
    summary: str | None = None
    public_timestamp: datetime | None = None
    organisations: list[str] = Field(default_factory=list)
    attachments: list[AttachmentResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, edition: EditionSummary) -> "EditionResponse":
        return cls(
            id=edition.id,
            document_id=edition.document_id,
            slug=edition.slug,
            type=edition.edition_type,
            title=edition.title,
            summary=edition.summary,
            public_timestamp=edition.public_timestamp,
            organisations=list(edition.organisation_names),
            attachments=[
                AttachmentResponse(id=a.id, title=a.title, filename=a.filename)
                for a in edition.attachments
            ],
        )


class PaginationResponse(BaseModel):
    """Metadata for rendering pagination controls."""

    current_page: int
    per_page: int
    total_count: int
    total_pages: int
    next_page: int | None = None
    prev_page: int | None = None


class FilterResultsResponse(BaseModel):
    """A page of filter results in search provider order."""

    results: list[EditionResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: ResultPage[EditionSummary]) -> "FilterResultsResponse":
        return cls(
            results=[EditionResponse.from_summary(e) for e in page.items],
            pagination=PaginationResponse(
                current_page=page.page,
                per_page=page.per_page,
                total_count=page.total_count,
                total_pages=page.total_pages,
                next_page=page.next_page,
                prev_page=page.prev_page,
            ),
        )


class FilterOptionResponse(BaseModel):
    slug: str
    label: str
    search_format_types: list[str]

    @classmethod
    def from_option(cls, option: FilterOption) -> "FilterOptionResponse":
        return cls(
            slug=option.slug,
            label=option.label,
            search_format_types=list(option.search_format_types),
        )
