"""DTOs for taggable content select options (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TaggableRow:
    """Minimal taxonomy row needed to label a select option."""

    id: int
    name: str
    acronym: str | None = None


@dataclass(frozen=True)
class SelectOption:
    """One entry of a select list: the visible label and the submitted value."""

    label: str
    value: int

    def as_pair(self) -> list[str | int]:
        return [self.label, self.value]


@dataclass(frozen=True)
class UpdateStamp:
    """An id and its last update time; the digest input for cache keys."""

    id: int
    updated_at: datetime


@dataclass(frozen=True)
class RoleAppointmentRow:
    """A ministerial role appointment with what its select label needs.

    ended_at is None while the appointment is current.
    """

    id: int
    person_name: str
    role_name: str
    organisation_names: tuple[str, ...]
    started_at: datetime
    ended_at: datetime | None = None

    @property
    def is_current(self) -> bool:
        return self.ended_at is None
