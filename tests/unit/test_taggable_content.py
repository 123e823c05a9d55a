"""Tests for TaggableContentService (digest-keyed select option cache)."""

from datetime import datetime, timezone

import pytest

from whitehall.application.dtos.taggable import (
    RoleAppointmentRow,
    SelectOption,
    TaggableRow,
    UpdateStamp,
)
from whitehall.domain.enums import TaggableKind
from whitehall.infrastructure.cache.keys import taggable_digest, taggable_key
from whitehall.infrastructure.services.taggable_content import (
    TaggableContentService,
    ministerial_role_appointment_label,
    organisation_select_name,
    to_sentence,
)

from tests.fakes import FakeCache, FakeTaxonomyRepository

T1 = datetime(2013, 1, 1, 9, 0, tzinfo=timezone.utc)
T2 = datetime(2013, 1, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def repo() -> FakeTaxonomyRepository:
    repo = FakeTaxonomyRepository()
    repo.rows[TaggableKind.TOPICS] = [TaggableRow(2, "Welfare"), TaggableRow(1, "Housing")]
    repo.stamps[TaggableKind.TOPICS] = [UpdateStamp(1, T1), UpdateStamp(2, T1)]
    repo.rows[TaggableKind.ORGANISATIONS] = [
        TaggableRow(5, "HM Treasury", "HMT"),
        TaggableRow(6, "Cabinet Office", None),
    ]
    repo.stamps[TaggableKind.ORGANISATIONS] = [UpdateStamp(5, T1), UpdateStamp(6, T2)]
    return repo


class TestOrganisationSelectName:
    def test_with_acronym(self) -> None:
        assert organisation_select_name(TaggableRow(1, "HM Treasury", "HMT")) == "HM Treasury (HMT)"

    @pytest.mark.parametrize("acronym", [None, "", "  "])
    def test_without_acronym(self, acronym) -> None:
        assert organisation_select_name(TaggableRow(1, "Cabinet Office", acronym)) == "Cabinet Office"


async def test_options_ordered_by_name(repo) -> None:
    options = await TaggableContentService(repo).taggable_topics()
    assert options == [SelectOption("Housing", 1), SelectOption("Welfare", 2)]


async def test_organisation_labels(repo) -> None:
    options = await TaggableContentService(repo).taggable_organisations()
    assert [o.label for o in options] == ["Cabinet Office", "HM Treasury (HMT)"]


async def test_cache_miss_stores_pairs(repo) -> None:
    cache = FakeCache()
    await TaggableContentService(repo, cache, ttl=600).taggable_topics()

    key = taggable_key(taggable_digest("topics", [T1, T1]))
    assert cache.store[key] == [["Housing", 1], ["Welfare", 2]]
    assert cache.ttls[key] == 600


async def test_cache_hit_skips_row_query(repo) -> None:
    cache = FakeCache()
    await TaggableContentService(repo, cache).taggable_topics()
    options = await TaggableContentService(repo, cache).taggable_topics()

    assert repo.row_queries == 1
    assert options == [SelectOption("Housing", 1), SelectOption("Welfare", 2)]


async def test_record_update_changes_key(repo) -> None:
    cache = FakeCache()
    await TaggableContentService(repo, cache).taggable_topics()

    repo.stamps[TaggableKind.TOPICS] = [UpdateStamp(1, T1), UpdateStamp(2, T2)]
    repo.rows[TaggableKind.TOPICS] = [TaggableRow(1, "Housing"), TaggableRow(2, "Welfare reform")]
    options = await TaggableContentService(repo, cache).taggable_topics()

    assert repo.row_queries == 2
    assert [o.label for o in options] == ["Housing", "Welfare reform"]
    assert len(cache.store) == 2


async def test_unavailable_cache_falls_back_to_rows(repo) -> None:
    cache = FakeCache(available=False)
    service = TaggableContentService(repo, cache)
    await service.taggable_topics()
    await service.taggable_topics()
    assert repo.row_queries == 2
    assert cache.store == {}


async def test_organisations_digest_memoized_per_instance(repo) -> None:
    service = TaggableContentService(repo)
    first = await service.cache_digest(TaggableKind.ORGANISATIONS)

    repo.stamps[TaggableKind.ORGANISATIONS] = [UpdateStamp(5, T2)]
    assert await service.cache_digest(TaggableKind.ORGANISATIONS) == first

    fresh = await TaggableContentService(repo).cache_digest(TaggableKind.ORGANISATIONS)
    assert fresh != first


async def test_topic_digest_not_memoized(repo) -> None:
    service = TaggableContentService(repo)
    first = await service.cache_digest(TaggableKind.TOPICS)
    repo.stamps[TaggableKind.TOPICS] = [UpdateStamp(1, T2)]
    assert await service.cache_digest(TaggableKind.TOPICS) != first


async def test_kinds_have_distinct_keys(repo) -> None:
    repo.stamps[TaggableKind.TOPICAL_EVENTS] = list(repo.stamps[TaggableKind.TOPICS])
    service = TaggableContentService(repo)
    assert await service.cache_digest(TaggableKind.TOPICS) != await service.cache_digest(
        TaggableKind.TOPICAL_EVENTS
    )


async def test_no_cache_skips_digest_query(repo) -> None:
    service = TaggableContentService(repo)
    await service.taggable_topics()
    await service.taggable_organisations()
    assert repo.stamp_queries == 0
    assert repo.row_queries == 2


async def test_unavailable_cache_skips_digest_query(repo) -> None:
    await TaggableContentService(repo, FakeCache(available=False)).taggable_topics()
    assert repo.stamp_queries == 0


class TestMinisterialRoleAppointmentLabel:
    def test_current_appointment_has_no_dates(self) -> None:
        row = RoleAppointmentRow(
            id=1,
            person_name="George Osborne",
            role_name="Chancellor of the Exchequer",
            organisation_names=("HM Treasury",),
            started_at=datetime(2010, 5, 12, tzinfo=timezone.utc),
        )
        assert ministerial_role_appointment_label(row) == (
            "George Osborne, Chancellor of the Exchequer, HM Treasury"
        )

    def test_past_appointment_shows_dates_held(self) -> None:
        row = RoleAppointmentRow(
            id=2,
            person_name="Alistair Darling",
            role_name="Chancellor of the Exchequer",
            organisation_names=("HM Treasury",),
            started_at=datetime(2007, 6, 28, tzinfo=timezone.utc),
            ended_at=datetime(2010, 5, 11, tzinfo=timezone.utc),
        )
        assert ministerial_role_appointment_label(row) == (
            "Alistair Darling, Chancellor of the Exchequer (2007-06-28 to 2010-05-11), HM Treasury"
        )

    def test_several_organisations_read_as_sentence(self) -> None:
        row = RoleAppointmentRow(
            id=3,
            person_name="Jo Smith",
            role_name="Minister for Cities",
            organisation_names=("Cabinet Office", "DCLG", "HM Treasury"),
            started_at=datetime(2012, 9, 4, tzinfo=timezone.utc),
        )
        assert ministerial_role_appointment_label(row).endswith(
            "Cabinet Office, DCLG and HM Treasury"
        )


@pytest.mark.parametrize(
    ("words", "expected"),
    [((), ""), (("a",), "a"), (("a", "b"), "a and b"), (("a", "b", "c"), "a, b and c")],
)
def test_to_sentence(words, expected) -> None:
    assert to_sentence(words) == expected


async def test_ministerial_role_appointments_cached_under_own_digest(repo) -> None:
    repo.appointments = [
        RoleAppointmentRow(1, "Alistair Darling", "Chancellor", ("HM Treasury",), T1, T2),
        RoleAppointmentRow(2, "George Osborne", "Chancellor", ("HM Treasury",), T2),
    ]
    repo.stamps[TaggableKind.MINISTERIAL_ROLE_APPOINTMENTS] = [UpdateStamp(1, T1), UpdateStamp(2, T2)]
    cache = FakeCache()

    options = await TaggableContentService(repo, cache).taggable_ministerial_role_appointments()
    again = await TaggableContentService(repo, cache).taggable_ministerial_role_appointments()

    assert [o.value for o in options] == [1, 2]
    assert options[0].label == "Alistair Darling, Chancellor (2013-01-01 to 2013-01-02), HM Treasury"
    assert again == options
    assert repo.row_queries == 1
    key = taggable_key(taggable_digest("ministerial-role-appointments", [T1, T2]))
    assert key in cache.store
