"""
Library API Test Suite
Search, bookmarks and abuse reports.
"""
import pytest
from httpx import AsyncClient

from conftest import create_book, publish


class TestSearchAPI:
    """Test /api/search."""

    @pytest.mark.asyncio
    async def test_search_published_by_title_or_author(self, client: AsyncClient):
        dragon = (await create_book(client, title="The Dragon Keeper", author="Mira"))["bookId"]
        await publish(client, dragon)
        by_author = (await create_book(client, title="Poems", author="Dragonfly Press"))["bookId"]
        await publish(client, by_author)
        await create_book(client, title="Dragon Draft")

        results = (await client.get("/api/search", params={"q": "dRaGoN"})).json()
        assert sorted(book["bookId"] for book in results) == sorted([dragon, by_author])
        assert all(book["content"] is None for book in results)

    @pytest.mark.asyncio
    async def test_search_query_too_short(self, client: AsyncClient):
        assert (await client.get("/api/search", params={"q": "a"})).status_code == 400
        assert (await client.get("/api/search")).status_code == 400

    @pytest.mark.asyncio
    async def test_search_wildcards_are_literal(self, client: AsyncClient):
        book_id = (await create_book(client, title="100% Real"))["bookId"]
        await publish(client, book_id)
        await publish(client, (await create_book(client, title="Other"))["bookId"])

        results = (await client.get("/api/search", params={"q": "0%"})).json()
        assert [book["bookId"] for book in results] == [book_id]


class TestBookmarksAPI:
    """Test /api/bookmarks."""

    @pytest.mark.asyncio
    async def test_bookmark_last_write_wins(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        params = {"playerId": "reader", "bookId": book_id}

        empty = await client.get("/api/bookmarks", params=params)
        assert empty.json() == {"bookmark": None}

        await client.post("/api/bookmarks", json={**params, "page": 1})
        saved = await client.post("/api/bookmarks", json={**params, "page": 2})
        assert saved.status_code == 200
        assert saved.json()["bookmark"]["page"] == 2

        lookup = (await client.get("/api/bookmarks", params=params)).json()
        assert lookup["bookmark"]["page"] == 2

    @pytest.mark.asyncio
    async def test_bookmark_unknown_book(self, client: AsyncClient):
        response = await client.post("/api/bookmarks", json={"playerId": "r", "bookId": "missing", "page": 1})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_bookmark_page_must_be_positive(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        response = await client.post("/api/bookmarks", json={"playerId": "r", "bookId": book_id, "page": 0})
        assert response.status_code == 400


class TestReportsAPI:
    """Test /api/books/{bookId}/reports."""

    @pytest.mark.asyncio
    async def test_reports_are_appended(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        first = await client.post(
            f"/api/books/{book_id}/reports",
            json={"playerId": "p1", "playerName": "Watcher", "reason": "Spam"},
        )
        assert first.status_code == 201
        assert first.json()["success"] is True

        await client.post(f"/api/books/{book_id}/reports", json={"playerId": "p2", "reason": "Copied"})

        book = (await client.get(f"/api/books/{book_id}")).json()
        assert [r["reason"] for r in book["reports"]] == ["Spam", "Copied"]
        assert book["reports"][0]["playerName"] == "Watcher"

    @pytest.mark.asyncio
    async def test_report_unknown_book(self, client: AsyncClient):
        response = await client.post("/api/books/missing/reports", json={"playerId": "p1", "reason": "x"})
        assert response.status_code == 404
