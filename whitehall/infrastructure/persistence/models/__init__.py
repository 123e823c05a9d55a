"""ORM models for the system of record (read by the document filter)."""

from whitehall.infrastructure.persistence.models.edition import (
    Attachment,
    Document,
    Edition,
    Response,
    edition_organisations,
)
from whitehall.infrastructure.persistence.models.role import (
    MINISTERIAL_ROLE,
    Person,
    Role,
    RoleAppointment,
    role_organisations,
)
from whitehall.infrastructure.persistence.models.taxonomy import (
    Organisation,
    Topic,
    TopicalEvent,
    WorldLocation,
)

__all__ = [
    "Attachment",
    "Document",
    "Edition",
    "MINISTERIAL_ROLE",
    "Organisation",
    "Person",
    "Response",
    "Role",
    "RoleAppointment",
    "Topic",
    "TopicalEvent",
    "WorldLocation",
    "edition_organisations",
    "role_organisations",
]
