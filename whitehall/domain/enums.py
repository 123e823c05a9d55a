"""Domain enumerations for the document filter."""

from enum import Enum


class SearchType(str, Enum):
    """Which family of content a filter request searches."""

    ANNOUNCEMENTS = "announcements"
    PUBLICATIONS = "publications"
    POLICIES = "policies"


class Direction(str, Enum):
    """Date direction recognised by the filter.

    Anything else supplied by a form is carried through as raw text and
    simply matches neither member.
    """

    BEFORE = "before"
    AFTER = "after"


class TaggableKind(str, Enum):
    """Taxonomies offered as select options when tagging content."""

    TOPICS = "topics"
    TOPICAL_EVENTS = "topical-events"
    ORGANISATIONS = "organisations"
    WORLD_LOCATIONS = "world-locations"
    MINISTERIAL_ROLE_APPOINTMENTS = "ministerial-role-appointments"
