"""Edition ORM models: documents, editions and their prefetchable associations.

An Edition is one version of a Document. Search hits carry edition ids;
the filter bulk-loads editions with the associations named by the search
type's eager-load strategy.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from whitehall.infrastructure.persistence.database import Base
from whitehall.infrastructure.persistence.models.mixins import IdMixin, TimestampMixin
from whitehall.infrastructure.persistence.models.taxonomy import Organisation

edition_organisations = Table(
    "edition_organisations",
    Base.metadata,
    Column("edition_id", Integer, ForeignKey("editions.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "organisation_id",
        Integer,
        ForeignKey("organisations.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Document(IdMixin, TimestampMixin, Base):
    """Stable identity shared by all editions of a piece of content. Table: documents."""

    __tablename__ = "documents"

    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    document_type: Mapped[str] = mapped_column(String(100), nullable=False)


class Edition(IdMixin, TimestampMixin, Base):
    """A published version of a document. Table: editions."""

    __tablename__ = "editions"

    document_id: Mapped[int] = mapped_column(
        ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str] = mapped_column(String(50), nullable=False, default="published")
    public_timestamp: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    document: Mapped[Document] = relationship(lazy="raise")
    organisations: Mapped[list[Organisation]] = relationship(
        secondary=edition_organisations, order_by=Organisation.name, lazy="raise"
    )
    attachments: Mapped[list["Attachment"]] = relationship(
        back_populates="edition", order_by="Attachment.ordering", lazy="raise"
    )
    response: Mapped[Optional["Response"]] = relationship(
        back_populates="edition", uselist=False, lazy="raise"
    )


class Response(IdMixin, TimestampMixin, Base):
    """Government response to a consultation. Table: responses."""

    __tablename__ = "responses"

    edition_id: Mapped[int] = mapped_column(
        ForeignKey("editions.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    edition: Mapped[Edition] = relationship(back_populates="response", lazy="raise")
    attachments: Mapped[list["Attachment"]] = relationship(
        back_populates="response", order_by="Attachment.ordering", lazy="raise"
    )


class Attachment(IdMixin, TimestampMixin, Base):
    """File attached to an edition or to a consultation response. Table: attachments."""

    __tablename__ = "attachments"

    edition_id: Mapped[int | None] = mapped_column(
        ForeignKey("editions.id", ondelete="CASCADE"), nullable=True, index=True
    )
    response_id: Mapped[int | None] = mapped_column(
        ForeignKey("responses.id", ondelete="CASCADE"), nullable=True, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ordering: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    edition: Mapped[Edition | None] = relationship(back_populates="attachments", lazy="raise")
    response: Mapped[Response | None] = relationship(
        back_populates="attachments", lazy="raise"
    )
