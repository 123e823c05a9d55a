"""Search format type codes and the sub-filter options built on them.

Every edition type is indexed under a format type code. The filter's
"type" dropdowns offer options that each expand to one or more of these
codes. The tables are static; options are resolved by slug, never by
looking up a model class by name.
"""

from dataclasses import dataclass

# Format type codes per edition type
ANNOUNCEMENT = "announcement"
PUBLICATION = "publication"
STATISTICAL_DATA_SET = "statistical-data-set"
CONSULTATION = "consultation"
POLICY = "policy"

DEFAULT_ANNOUNCEMENT_FORMAT_TYPES: tuple[str, ...] = (ANNOUNCEMENT,)
DEFAULT_PUBLICATION_FORMAT_TYPES: tuple[str, ...] = (
    PUBLICATION,
    STATISTICAL_DATA_SET,
    CONSULTATION,
)
POLICY_FORMAT_TYPES: tuple[str, ...] = (POLICY,)


@dataclass(frozen=True)
class FilterOption:
    """A user-selectable content sub-type.

    Attributes:
        slug: Value submitted by the filter form.
        label: Text shown in the dropdown.
        search_format_types: Codes the option expands to, in order.
    """

    slug: str
    label: str
    search_format_types: tuple[str, ...]


ANNOUNCEMENT_FILTER_OPTIONS: tuple[FilterOption, ...] = (
    FilterOption("press-releases", "Press releases", ("news-article-press-release",)),
    FilterOption("news-stories", "News stories", ("news-article-news-story",)),
    FilterOption("fatality-notices", "Fatality notices", ("fatality-notice",)),
    FilterOption(
        "speeches",
        "Speeches",
        (
            "speech-transcript",
            "speech-draft-text",
            "speech-speaking-notes",
            "speech-delivered-as-written",
        ),
    ),
    FilterOption(
        "statements",
        "Statements",
        ("speech-written-statement", "speech-oral-statement"),
    ),
    FilterOption(
        "government-responses",
        "Government responses",
        ("news-article-government-response",),
    ),
)

PUBLICATION_FILTER_OPTIONS: tuple[FilterOption, ...] = (
    FilterOption("policy-papers", "Policy papers", ("publication-policy-paper",)),
    FilterOption("consultations", "Consultations", (CONSULTATION,)),
    FilterOption(
        "impact-assessments", "Impact assessments", ("publication-impact-assessment",)
    ),
    FilterOption("guidance", "Guidance", ("publication-guidance",)),
    FilterOption("forms", "Forms", ("publication-form",)),
    FilterOption(
        "statistics",
        "Statistics",
        ("publication-statistics", "publication-national-statistics", STATISTICAL_DATA_SET),
    ),
    FilterOption(
        "research", "Research and analysis", ("publication-research-and-analysis",)
    ),
    FilterOption("corporate-reports", "Corporate reports", ("publication-corporate-report",)),
    FilterOption("transparency-data", "Transparency data", ("publication-transparency-data",)),
    FilterOption("foi-releases", "FOI releases", ("publication-foi-release",)),
    FilterOption(
        "international-treaties",
        "International treaties",
        ("publication-international-treaty",),
    ),
)

_ANNOUNCEMENT_OPTIONS_BY_SLUG = {o.slug: o for o in ANNOUNCEMENT_FILTER_OPTIONS}
_PUBLICATION_OPTIONS_BY_SLUG = {o.slug: o for o in PUBLICATION_FILTER_OPTIONS}


def find_announcement_option(slug: str | None) -> FilterOption | None:
    """Return the announcement option for slug, or None when absent or unknown."""
    if not slug:
        return None
    return _ANNOUNCEMENT_OPTIONS_BY_SLUG.get(slug)


def find_publication_option(slug: str | None) -> FilterOption | None:
    """Return the publication option for slug, or None when absent or unknown."""
    if not slug:
        return None
    return _PUBLICATION_OPTIONS_BY_SLUG.get(slug)
