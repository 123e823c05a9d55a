"""FilterCriteria: the immutable set of optional constraints for one filter request.

Built once per request, usually from loosely-typed query-string values via
FilterCriteria.from_params, then consumed by the query composer.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from whitehall.core.constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, MAX_PER_PAGE

# Selecting every person is expressed by the form as this single value.
ALL_PEOPLE: tuple[str, ...] = ("all",)

# The "All" entry in topic/organisation/location dropdowns.
_ALL_SLUG = "all"

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y")


def _blank_to_none(value: Any) -> str | None:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_list(value: Any) -> list[str]:
    """Accept a single value, a comma-free list, or None; drop blanks."""
    if value is None:
        return []
    items: Iterable[Any] = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
    return [str(item).strip() for item in items if item is not None and str(item).strip()]


def _lookup(params: Mapping[str, Any], *keys: str) -> Any:
    """First present value among keys, also trying the Rails-style 'key[]' spelling."""
    for key in keys:
        for candidate in (key, f"{key}[]"):
            if candidate in params and params[candidate] is not None:
                return params[candidate]
    return None


def _parse_date(value: Any) -> dt.date | None:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = _blank_to_none(value)
    if text is None:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return dt.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _parse_int(value: Any, default: int, lower: int, upper: int | None = None) -> int:
    text = _blank_to_none(value)
    try:
        number = int(text) if text is not None else default
    except ValueError:
        number = default
    number = max(lower, number)
    if upper is not None:
        number = min(upper, number)
    return number


def _parse_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = _blank_to_none(value)
    if text is None:
        return None
    return text.lower() in _TRUE_STRINGS


@dataclass(frozen=True)
class FilterCriteria:
    """Optional constraints for a document filter request.

    Every field is independently optional: None or an empty tuple means
    "no constraint", never "match nothing". Topics, organisations and
    world locations are slugs; they are resolved to records before the
    search parameters are composed.
    """

    keywords: str | None = None
    people: tuple[str, ...] = ()
    topics: tuple[str, ...] = ()
    organisations: tuple[str, ...] = ()
    world_locations: tuple[str, ...] = ()
    date: dt.date | None = None
    direction: str | None = None
    announcement_type: str | None = None
    publication_type: str | None = None
    relevant_to_local_government: bool | None = None
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @property
    def has_keywords(self) -> bool:
        """True when keywords contain something other than whitespace."""
        return bool(self.keywords and self.keywords.strip())

    @property
    def selects_all_people(self) -> bool:
        return self.people == ALL_PEOPLE

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        default_per_page: int = DEFAULT_PER_PAGE,
    ) -> FilterCriteria:
        """Build criteria from untyped request parameters.

        Lenient: blank values are treated as absent, an
        unparseable date is ignored, and paging is clamped into range.
        Organisations may be supplied as "departments" (the public form's
        field name). The "all" slug is dropped from taxonomy selections.

        Args:
            params: Query-string style mapping; values are strings or lists of strings.
            default_per_page: Page size when none (or an invalid one) is given.

        Returns:
            A new FilterCriteria.
        """

        def slugs(*keys: str) -> tuple[str, ...]:
            return tuple(s for s in _as_list(_lookup(params, *keys)) if s != _ALL_SLUG)

        return cls(
            keywords=_blank_to_none(_lookup(params, "keywords")),
            people=tuple(_as_list(_lookup(params, "people", "people_ids"))),
            topics=slugs("topics"),
            organisations=slugs("organisations", "departments"),
            world_locations=slugs("world_locations"),
            date=_parse_date(_lookup(params, "date")),
            direction=_blank_to_none(_lookup(params, "direction")),
            announcement_type=_blank_to_none(_lookup(params, "announcement_type")),
            publication_type=_blank_to_none(
                _lookup(params, "publication_filter_option", "publication_type")
            ),
            relevant_to_local_government=_parse_bool(
                _lookup(params, "relevant_to_local_government")
            ),
            page=_parse_int(_lookup(params, "page"), DEFAULT_PAGE, lower=1),
            per_page=_parse_int(
                _lookup(params, "per_page"), default_per_page, lower=1, upper=MAX_PER_PAGE
            ),
        )
