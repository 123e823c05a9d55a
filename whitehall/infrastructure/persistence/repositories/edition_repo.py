"""Edition repository: bulk load of search hits with declared prefetching."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from whitehall.application.dtos.search import (
    AttachmentSummary,
    EagerLoad,
    EditionSummary,
)
from whitehall.infrastructure.persistence.models.edition import Attachment, Edition


def loader_options(model: type[Any], eager_load: EagerLoad) -> list[Any]:
    """Turn association paths into chained selectinload options.

    ("response", "attachments") becomes
    selectinload(Edition.response).selectinload(Response.attachments).

    Raises:
        ValueError: If a path names an attribute that is not a relationship.
    """
    options: list[Any] = []
    for path in eager_load:
        owner = model
        option: Any = None
        for name in path:
            relationships = sa_inspect(owner).relationships
            if name not in relationships:
                raise ValueError(f"{owner.__name__} has no association {name!r}")
            attr = getattr(owner, name)
            option = selectinload(attr) if option is None else option.selectinload(attr)
            owner = relationships[name].mapper.class_
        if option is not None:
            options.append(option)
    return options


def _attachment_summaries(attachments: Sequence[Attachment]) -> tuple[AttachmentSummary, ...]:
    return tuple(
        AttachmentSummary(id=a.id, title=a.title, filename=a.filename) for a in attachments
    )


def _to_summary(edition: Edition) -> EditionSummary:
    """Map to the read-model, touching only associations that were prefetched."""
    unloaded = sa_inspect(edition).unloaded
    slug = edition.document.slug if "document" not in unloaded else ""
    organisation_names: tuple[str, ...] = ()
    if "organisations" not in unloaded:
        organisation_names = tuple(o.name for o in edition.organisations)
    attachments: tuple[AttachmentSummary, ...] = ()
    if "attachments" not in unloaded:
        attachments = _attachment_summaries(edition.attachments)
    if "response" not in unloaded and edition.response is not None:
        if "attachments" not in sa_inspect(edition.response).unloaded:
            attachments += _attachment_summaries(edition.response.attachments)
    return EditionSummary(
        id=edition.id,
        document_id=edition.document_id,
        slug=slug,
        edition_type=edition.type,
        title=edition.title,
        summary=edition.summary,
        public_timestamp=edition.public_timestamp,
        organisation_names=organisation_names,
        attachments=attachments,
    )


class EditionRepository:
    """Reads editions from the system of record (implements IEditionRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_ids(
        self, ids: Sequence[int], eager_load: EagerLoad
    ) -> list[EditionSummary]:
        """Return editions whose id is in ids (storage order) with associations prefetched.

        One SELECT ... WHERE id IN (...) for the editions, plus one batched
        SELECT per prefetched association, regardless of how many ids.
        """
        if not ids:
            return []
        stmt = (
            select(Edition)
            .where(Edition.id.in_(set(ids)))
            .options(*loader_options(Edition, eager_load))
        )
        result = await self.db.execute(stmt)
        return [_to_summary(edition) for edition in result.scalars().unique().all()]
