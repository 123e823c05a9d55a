"""HTTP tests for the document filter endpoints (fakes behind dependency overrides)."""

import httpx
import pytest
from httpx import AsyncClient

from whitehall.api.v1.dependencies import (
    get_edition_repo,
    get_search_gateway,
    get_taxonomy_repo,
)
from whitehall.application.dtos.search import AttachmentSummary, SearchResultSet
from whitehall.core.config import SearchConfig
from whitehall.domain.enums import TaggableKind
from whitehall.infrastructure.external.search import HttpSearchGateway

from tests.fakes import make_edition


@pytest.fixture
def wired(app, search_gateway, edition_repo, taxonomy_repo):
    """Route the document filter through in-memory fakes."""
    app.dependency_overrides[get_search_gateway] = lambda: search_gateway
    app.dependency_overrides[get_edition_repo] = lambda: edition_repo
    app.dependency_overrides[get_taxonomy_repo] = lambda: taxonomy_repo
    yield
    app.dependency_overrides.clear()


async def test_publications_in_provider_order(
    client: AsyncClient, wired, search_gateway, edition_repo
) -> None:
    edition_repo.editions = {
        2: make_edition(2, "B"),
        5: make_edition(
            5, "A", attachments=(AttachmentSummary(id=1, title="PDF", filename="a.pdf"),)
        ),
        8: make_edition(8, "C"),
    }
    search_gateway.result_set = SearchResultSet(ids=(5, 2, 8), total=43)

    response = await client.get("/api/v1/publications", params={"per_page": "3"})

    assert response.status_code == 200
    body = response.json()
    assert [r["title"] for r in body["results"]] == ["A", "B", "C"]
    assert body["results"][0]["attachments"][0]["filename"] == "a.pdf"
    assert body["pagination"] == {
        "current_page": 1,
        "per_page": 3,
        "total_count": 43,
        "total_pages": 15,
        "next_page": 2,
        "prev_page": None,
    }


async def test_query_string_reaches_provider(
    client: AsyncClient, wired, search_gateway, taxonomy_repo
) -> None:
    taxonomy_repo.add(TaggableKind.ORGANISATIONS, 1, "hm-treasury", "HM Treasury")

    response = await client.get(
        "/api/v1/announcements",
        params=[
            ("departments[]", "hm-treasury"),
            ("people[]", "all"),
            ("date", "2012-12-21"),
            ("direction", "before"),
            ("announcement_type", "speeches"),
            ("page", "2"),
        ],
    )

    assert response.status_code == 200
    params = search_gateway.requests[0]
    assert params["organisations"] == ["1"]
    assert "people" not in params
    assert params["public_timestamp"] == {"before": "2012-12-20"}
    assert params["order"] == {"public_timestamp": "desc"}
    assert params["page"] == "2"
    assert "speech-transcript" in params["search_format_types"]


async def test_no_hits_returns_empty_page(client: AsyncClient, wired, edition_repo) -> None:
    response = await client.get("/api/v1/policies")
    assert response.status_code == 200
    assert response.json()["results"] == []
    assert response.json()["pagination"]["total_pages"] == 0
    assert edition_repo.calls == []


async def test_garbage_parameters_are_ignored(client: AsyncClient, wired) -> None:
    response = await client.get(
        "/api/v1/announcements",
        params={"date": "not-a-date", "page": "abc", "per_page": "-4"},
    )
    assert response.status_code == 200
    assert response.json()["pagination"]["current_page"] == 1
    assert response.json()["pagination"]["per_page"] == 1


async def test_provider_unreachable_returns_502(
    client: AsyncClient, wired, search_gateway
) -> None:
    search_gateway.error = httpx.ConnectError("connection refused")
    response = await client.get("/api/v1/announcements")
    assert response.status_code == 502
    assert response.json()["error"] == "SEARCH_UNAVAILABLE"


async def test_malformed_provider_body_returns_502(
    app, client: AsyncClient, wired
) -> None:
    bad_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"hits": []}))
    )
    app.dependency_overrides[get_search_gateway] = lambda: HttpSearchGateway(
        bad_client, SearchConfig(search_api_url="http://search.test")
    )
    async with bad_client:
        response = await client.get("/api/v1/publications")
    assert response.status_code == 502
    assert response.json()["error"] == "SEARCH_RESPONSE_INVALID"


async def test_provider_error_status_returns_502(
    app, client: AsyncClient, wired
) -> None:
    failing = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(503))
    )
    app.dependency_overrides[get_search_gateway] = lambda: HttpSearchGateway(
        failing, SearchConfig(search_api_url="http://search.test")
    )
    async with failing:
        response = await client.get("/api/v1/policies")
    assert response.status_code == 502


async def test_announcement_filter_options(client: AsyncClient) -> None:
    response = await client.get("/api/v1/filter-options/announcement-types")
    assert response.status_code == 200
    statements = next(o for o in response.json() if o["slug"] == "statements")
    assert statements["search_format_types"] == [
        "speech-written-statement",
        "speech-oral-statement",
    ]


async def test_publication_filter_options(client: AsyncClient) -> None:
    response = await client.get("/api/v1/filter-options/publication-types")
    assert response.status_code == 200
    slugs = [o["slug"] for o in response.json()]
    assert "consultations" in slugs
    assert "statistics" in slugs


async def test_earliest_possible_date_is_not_an_error(
    client: AsyncClient, wired, search_gateway
) -> None:
    response = await client.get(
        "/api/v1/announcements", params={"date": "0001-01-01", "direction": "before"}
    )
    assert response.status_code == 200
    assert "public_timestamp" not in search_gateway.requests[0]
