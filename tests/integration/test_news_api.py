"""End-to-end tests for the news endpoints over an in-memory repository."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from news_api.infrastructure.dependencies import get_news_repository
from news_api.main import create_app


@pytest_asyncio.fixture
async def client(news_repository) -> AsyncIterator[AsyncClient]:
    app = create_app()
    app.dependency_overrides[get_news_repository] = lambda: news_repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_list_empty(client: AsyncClient, news_repository):
    response = await client.get("/api/v1/news", params={"page": 1, "limit": 10})
    assert response.status_code == 200
    assert response.json() == {
        "data": [],
        "total": 0,
        "page": 1,
        "limit": 10,
        "totalPages": 0,
    }

    again = await client.get("/api/v1/news", params={"page": 1, "limit": 10})
    assert again.json() == response.json()
    assert news_repository.find_page_calls == 1


@pytest.mark.asyncio
async def test_create_then_list_reflects_new_record(client: AsyncClient):
    await client.get("/api/v1/news")

    created = await client.post(
        "/api/v1/news",
        json={"title": "Launch", "content": "Rocket lifted off", "category": "science"},
    )
    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 1
    assert body["author"] is None

    listing = (await client.get("/api/v1/news", params={"page": 1, "limit": 10})).json()
    assert listing["total"] == 1
    assert listing["totalPages"] == 1
    assert listing["data"][0]["title"] == "Launch"


@pytest.mark.asyncio
async def test_limit_is_clamped(client: AsyncClient):
    response = await client.get("/api/v1/news", params={"limit": 1000, "page": 0})
    assert response.status_code == 200
    assert response.json()["limit"] == 100
    assert response.json()["page"] == 1


@pytest.mark.asyncio
async def test_get_update_delete(client: AsyncClient):
    news_id = (
        await client.post("/api/v1/news", json={"title": "Draft", "content": "Text"})
    ).json()["id"]

    fetched = await client.get(f"/api/v1/news/{news_id}")
    assert fetched.status_code == 200

    patched = await client.patch(f"/api/v1/news/{news_id}", json={"title": "Final"})
    assert patched.status_code == 200
    assert patched.json()["title"] == "Final"
    assert patched.json()["content"] == "Text"

    put = await client.put(f"/api/v1/news/{news_id}", json={"author": "Desk"})
    assert put.status_code == 200
    assert put.json()["author"] == "Desk"

    deleted = await client.delete(f"/api/v1/news/{news_id}")
    assert deleted.status_code == 204
    assert (await client.get(f"/api/v1/news/{news_id}")).status_code == 404


@pytest.mark.asyncio
async def test_missing_record_returns_404(client: AsyncClient):
    assert (await client.get("/api/v1/news/42")).status_code == 404
    assert (await client.patch("/api/v1/news/42", json={"title": "x"})).status_code == 404
    assert (await client.delete("/api/v1/news/42")).status_code == 404


@pytest.mark.asyncio
async def test_invalid_body_is_rejected(client: AsyncClient):
    response = await client.post("/api/v1/news", json={"title": "", "content": "x"})
    assert response.status_code == 422

    response = await client.post(
        "/api/v1/news", json={"title": "t", "content": "c", "bogus": 1}
    )
    assert response.status_code == 422

    news_id = (
        await client.post("/api/v1/news", json={"title": "t", "content": "c"})
    ).json()["id"]
    response = await client.patch(f"/api/v1/news/{news_id}", json={"bogus": 1})
    assert response.status_code == 422
    response = await client.patch(f"/api/v1/news/{news_id}", json={"title": None})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_search_filter(client: AsyncClient):
    await client.post("/api/v1/news", json={"title": "Election night", "content": "Votes"})
    await client.post("/api/v1/news", json={"title": "Weather", "content": "Rain"})

    listing = (await client.get("/api/v1/news", params={"search": "election"})).json()
    assert listing["total"] == 1
    assert listing["data"][0]["title"] == "Election night"


@pytest.mark.asyncio
async def test_patch_null_clears_author(client: AsyncClient):
    news_id = (
        await client.post(
            "/api/v1/news", json={"title": "Byline", "content": "Body", "author": "Desk"}
        )
    ).json()["id"]

    response = await client.patch(f"/api/v1/news/{news_id}", json={"author": None})

    assert response.status_code == 200
    assert response.json()["author"] is None
    assert response.json()["title"] == "Byline"
