"""Tests for ResultMaterializer (provider ids -> ordered page)."""

from whitehall.application.dtos.search import ResultPage, SearchResultSet
from whitehall.application.services.query_composer import BASE_EAGER_LOAD
from whitehall.application.services.result_materializer import ResultMaterializer

from tests.fakes import FakeEditionRepository, make_edition


async def test_items_follow_provider_order() -> None:
    """Ids [5, 2, 8] come back in that order although storage returns 2, 5, 8."""
    repo = FakeEditionRepository(
        [make_edition(2, "B"), make_edition(5, "A"), make_edition(8, "C")]
    )
    page = await ResultMaterializer(repo).materialize(
        SearchResultSet(ids=(5, 2, 8), total=3), BASE_EAGER_LOAD, page=1, per_page=20
    )
    assert [e.title for e in page.items] == ["A", "B", "C"]
    assert page.total_count == 3


async def test_single_bulk_fetch_with_eager_load() -> None:
    repo = FakeEditionRepository([make_edition(1), make_edition(2)])
    await ResultMaterializer(repo).materialize(
        SearchResultSet(ids=(2, 1), total=2), BASE_EAGER_LOAD, page=1, per_page=20
    )
    assert repo.calls == [([2, 1], BASE_EAGER_LOAD)]


async def test_empty_result_set_skips_repository() -> None:
    repo = FakeEditionRepository([make_edition(1)])
    page = await ResultMaterializer(repo).materialize(
        SearchResultSet.empty(), BASE_EAGER_LOAD, page=3, per_page=10
    )
    assert repo.calls == []
    assert page.items == ()
    assert page.total_count == 0
    assert page.page == 3
    assert page.per_page == 10


async def test_missing_ids_are_compacted_and_logged(caplog) -> None:
    repo = FakeEditionRepository([make_edition(5), make_edition(8)])
    with caplog.at_level("WARNING"):
        page = await ResultMaterializer(repo).materialize(
            SearchResultSet(ids=(5, 2, 8), total=40), BASE_EAGER_LOAD, page=1, per_page=3
        )
    assert [e.id for e in page.items] == [5, 8]
    assert page.total_count == 40
    assert "no matching edition" in caplog.text


async def test_page_and_per_page_come_from_request() -> None:
    repo = FakeEditionRepository([make_edition(7)])
    page = await ResultMaterializer(repo).materialize(
        SearchResultSet(ids=(7,), total=61), BASE_EAGER_LOAD, page=4, per_page=20
    )
    assert (page.page, page.per_page, page.total_count) == (4, 20, 61)


class TestResultPage:
    """Pagination helpers on ResultPage."""

    def test_total_pages_rounds_up(self) -> None:
        assert ResultPage(items=(), page=1, per_page=20, total_count=41).total_pages == 3

    def test_no_results_has_no_pages(self) -> None:
        page = ResultPage(items=(), page=1, per_page=20, total_count=0)
        assert page.total_pages == 0
        assert page.next_page is None
        assert page.prev_page is None

    def test_middle_page_links(self) -> None:
        page = ResultPage(items=(), page=2, per_page=10, total_count=35)
        assert page.prev_page == 1
        assert page.next_page == 3
        assert not page.is_first_page
        assert not page.is_last_page

    def test_last_page(self) -> None:
        page = ResultPage(items=(), page=4, per_page=10, total_count=35)
        assert page.is_last_page
        assert page.next_page is None

    def test_len_counts_items(self) -> None:
        page = ResultPage(items=(make_edition(1), make_edition(2)), page=1, per_page=20, total_count=2)
        assert len(page) == 2
