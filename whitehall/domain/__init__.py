"""Domain layer: value objects, enums, format type tables, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from whitehall.domain.enums import Direction, SearchType, TaggableKind
from whitehall.domain.exceptions import (
    SearchResponseException,
    SqlNotConfiguredException,
    WhitehallException,
)
from whitehall.domain.value_objects import ALL_PEOPLE, FilterCriteria

__all__ = [
    # Enums
    "Direction",
    "SearchType",
    "TaggableKind",
    # Exceptions
    "SearchResponseException",
    "SqlNotConfiguredException",
    "WhitehallException",
    # Value objects
    "ALL_PEOPLE",
    "FilterCriteria",
]
