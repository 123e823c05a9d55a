"""Role ORM models: people, roles and the appointments that connect them.

Only ministerial role appointments are offered for tagging; a role's
organisations are what an appointment's select label lists.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from whitehall.infrastructure.persistence.database import Base
from whitehall.infrastructure.persistence.models.mixins import IdMixin, TimestampMixin
from whitehall.infrastructure.persistence.models.taxonomy import Organisation

MINISTERIAL_ROLE = "MinisterialRole"

role_organisations = Table(
    "organisation_roles",
    Base.metadata,
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "organisation_id",
        Integer,
        ForeignKey("organisations.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Person(IdMixin, TimestampMixin, Base):
    """Someone who holds or has held a role. Table: people."""

    __tablename__ = "people"

    forename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    surname: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    @property
    def name(self) -> str:
        return " ".join(part for part in (self.forename, self.surname) if part)


class Role(IdMixin, TimestampMixin, Base):
    """A position within government, e.g. a ministerial or board role. Table: roles."""

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    organisations: Mapped[list[Organisation]] = relationship(
        secondary=role_organisations, order_by=Organisation.name, lazy="raise"
    )


class RoleAppointment(IdMixin, TimestampMixin, Base):
    """A person holding a role for a period. Table: role_appointments."""

    __tablename__ = "role_appointments"

    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role_id: Mapped[int] = mapped_column(
        ForeignKey("roles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    person: Mapped[Person] = relationship(lazy="raise")
    role: Mapped[Role] = relationship(lazy="raise")
