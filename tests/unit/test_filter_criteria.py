"""Tests for FilterCriteria.from_params (lenient parsing of request values)."""

import typing
from datetime import date

from whitehall.domain.value_objects.filter_criteria import ALL_PEOPLE, FilterCriteria


class TestDefaults:
    """Absent values mean no constraint."""

    def test_empty_params(self) -> None:
        criteria = FilterCriteria.from_params({})
        assert criteria.keywords is None
        assert criteria.people == ()
        assert criteria.topics == ()
        assert criteria.organisations == ()
        assert criteria.world_locations == ()
        assert criteria.date is None
        assert criteria.direction is None
        assert criteria.relevant_to_local_government is None
        assert criteria.page == 1
        assert criteria.per_page == 20

    def test_default_per_page_from_caller(self) -> None:
        assert FilterCriteria.from_params({}, default_per_page=40).per_page == 40

    def test_blank_strings_are_absent(self) -> None:
        criteria = FilterCriteria.from_params(
            {"keywords": "   ", "direction": "", "announcement_type": " "}
        )
        assert criteria.keywords is None
        assert criteria.direction is None
        assert criteria.announcement_type is None


class TestSelections:
    def test_single_value_becomes_tuple(self) -> None:
        assert FilterCriteria.from_params({"topics": "climate-change"}).topics == (
            "climate-change",
        )

    def test_rails_style_list_keys(self) -> None:
        criteria = FilterCriteria.from_params({"topics[]": ["a", "b"], "people[]": ["3"]})
        assert criteria.topics == ("a", "b")
        assert criteria.people == ("3",)

    def test_all_slug_dropped_from_taxonomies(self) -> None:
        criteria = FilterCriteria.from_params(
            {
                "topics": ["all"],
                "departments": ["all", "hm-treasury"],
                "world_locations": ["all"],
            }
        )
        assert criteria.topics == ()
        assert criteria.organisations == ("hm-treasury",)
        assert criteria.world_locations == ()

    def test_all_people_sentinel_is_kept(self) -> None:
        criteria = FilterCriteria.from_params({"people": ["all"]})
        assert criteria.people == ALL_PEOPLE
        assert criteria.selects_all_people

    def test_organisations_key_also_accepted(self) -> None:
        assert FilterCriteria.from_params({"organisations": "dfid"}).organisations == ("dfid",)


class TestDates:
    def test_iso_date(self) -> None:
        assert FilterCriteria.from_params({"date": "2012-12-21"}).date == date(2012, 12, 21)

    def test_day_month_year(self) -> None:
        assert FilterCriteria.from_params({"date": "21/12/2012"}).date == date(2012, 12, 21)

    def test_unparseable_date_ignored(self) -> None:
        assert FilterCriteria.from_params({"date": "next tuesday"}).date is None

    def test_direction_kept_verbatim(self) -> None:
        assert FilterCriteria.from_params({"direction": "sideways"}).direction == "sideways"


class TestPaging:
    def test_page_parsed(self) -> None:
        criteria = FilterCriteria.from_params({"page": "3", "per_page": "10"})
        assert (criteria.page, criteria.per_page) == (3, 10)

    def test_invalid_page_falls_back(self) -> None:
        assert FilterCriteria.from_params({"page": "abc"}).page == 1

    def test_page_clamped_to_one(self) -> None:
        assert FilterCriteria.from_params({"page": "-4"}).page == 1

    def test_per_page_clamped(self) -> None:
        assert FilterCriteria.from_params({"per_page": "5000"}).per_page == 100
        assert FilterCriteria.from_params({"per_page": "0"}).per_page == 1


class TestFlags:
    def test_relevant_to_local_government_truthy(self) -> None:
        for value in ("1", "true", "TRUE", "yes", "on"):
            assert FilterCriteria.from_params(
                {"relevant_to_local_government": value}
            ).relevant_to_local_government is True

    def test_relevant_to_local_government_falsy(self) -> None:
        assert FilterCriteria.from_params(
            {"relevant_to_local_government": "0"}
        ).relevant_to_local_government is False

    def test_publication_filter_option_alias(self) -> None:
        criteria = FilterCriteria.from_params({"publication_filter_option": "consultations"})
        assert criteria.publication_type == "consultations"


def test_has_keywords_ignores_whitespace() -> None:
    assert not FilterCriteria(keywords="  ").has_keywords
    assert FilterCriteria(keywords="tax").has_keywords


def test_type_hints_resolve() -> None:
    hints = typing.get_type_hints(FilterCriteria)
    assert hints["date"] == date | None
