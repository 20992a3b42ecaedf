"""
Engagement API Test Suite
Votes, views, comments, XP and playtime.
"""
import pytest
from httpx import AsyncClient

from app.services import engagement

from conftest import create_book


class TestVotesAPI:
    """Test /api/votes."""

    @pytest.mark.asyncio
    async def test_vote_is_idempotent(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        params = {"playerId": "voter", "bookId": book_id}

        before = await client.get("/api/votes", params=params)
        assert before.json() == {"voted": False}

        first = await client.post("/api/votes", json={**params, "voteType": "up"})
        assert first.status_code == 200
        assert first.json() == {"success": True, "upvotes": 1}

        second = await client.post("/api/votes", json={**params, "voteType": "up"})
        assert second.json()["upvotes"] == 1

        after = await client.get("/api/votes", params=params)
        assert after.json() == {"voted": True}

        book = (await client.get(f"/api/books/{book_id}")).json()
        assert book["upvotes"] == len(book["voters"]) == 1

    @pytest.mark.asyncio
    async def test_votes_from_different_players_accumulate(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        for voter in ("a", "b"):
            response = await client.post("/api/votes", json={"playerId": voter, "bookId": book_id})
        assert response.json()["upvotes"] == 2

    @pytest.mark.asyncio
    async def test_only_up_votes(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        response = await client.post(
            "/api/votes",
            json={"playerId": "voter", "bookId": book_id, "voteType": "down"},
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_vote_unknown_book(self, client: AsyncClient):
        response = await client.post("/api/votes", json={"playerId": "voter", "bookId": "missing"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_check_vote_unknown_book(self, client: AsyncClient):
        response = await client.get("/api/votes", params={"playerId": "voter", "bookId": "missing"})
        assert response.status_code == 200
        assert response.json() == {"voted": False}

    @pytest.mark.asyncio
    async def test_check_vote_requires_params(self, client: AsyncClient):
        response = await client.get("/api/votes", params={"playerId": "voter"})
        assert response.status_code == 400


class TestViewsAPI:
    """Test /api/views."""

    @pytest.mark.asyncio
    async def test_view_counted_once_per_day(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        body = {"playerId": "reader", "bookId": book_id}

        first = await client.post("/api/views", json=body)
        assert first.json() == {"success": True, "duplicate": False, "views": 1}

        second = await client.post("/api/views", json=body)
        assert second.json() == {"success": True, "duplicate": True, "views": 1}

        other = await client.post("/api/views", json={"playerId": "other", "bookId": book_id})
        assert other.json()["views"] == 2

    @pytest.mark.asyncio
    async def test_view_requires_fields(self, client: AsyncClient):
        response = await client.post("/api/views", json={"playerId": "reader"})
        assert response.status_code == 400


class TestCommentsAPI:
    """Test /api/books/{bookId}/comments."""

    @pytest.mark.asyncio
    async def test_add_comment_seeds_own_like(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        response = await client.post(
            f"/api/books/{book_id}/comments",
            json={"playerId": "p1", "username": "Reader", "text": "Loved it"},
        )
        assert response.status_code == 200
        comments = response.json()["comments"]
        assert len(comments) == 1
        assert comments[0]["likes"] == ["p1"]
        assert comments[0]["dislikes"] == []
        assert comments[0]["username"] == "Reader"

    @pytest.mark.asyncio
    async def test_second_comment_forbidden(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        body = {"playerId": "p1", "username": "Reader", "text": "First"}
        await client.post(f"/api/books/{book_id}/comments", json=body)

        again = await client.post(f"/api/books/{book_id}/comments", json={**body, "text": "Second"})
        assert again.status_code == 403

        listing = await client.get(f"/api/books/{book_id}/comments")
        comments = listing.json()["comments"]
        assert len(comments) == 1
        assert comments[0]["text"] == "First"

    @pytest.mark.asyncio
    async def test_comment_unknown_book(self, client: AsyncClient):
        response = await client.post(
            "/api/books/missing/comments",
            json={"playerId": "p1", "username": "Reader", "text": "Hi"},
        )
        assert response.status_code == 404
        assert (await client.get("/api/books/missing/comments")).status_code == 404

    @pytest.mark.asyncio
    async def test_comment_requires_text(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        response = await client.post(
            f"/api/books/{book_id}/comments",
            json={"playerId": "p1", "username": "Reader", "text": "   "},
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_comments_ranked_by_likes_then_newest(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        for player in ("p1", "p2", "p3"):
            await client.post(
                f"/api/books/{book_id}/comments",
                json={"playerId": player, "username": player.upper(), "text": f"from {player}"},
            )

        # All tied on one like: newest first
        listing = (await client.get(f"/api/books/{book_id}/comments")).json()["comments"]
        assert [c["playerId"] for c in listing] == ["p3", "p2", "p1"]

        p1_comment = next(c for c in listing if c["playerId"] == "p1")
        response = await client.post(
            f"/api/books/{book_id}/comments/{p1_comment['id']}/reactions",
            json={"playerId": "fan", "reaction": "like"},
        )
        assert response.status_code == 200
        ranked = response.json()["comments"]
        assert ranked[0]["playerId"] == "p1"
        assert sorted(ranked[0]["likes"]) == ["fan", "p1"]

    @pytest.mark.asyncio
    async def test_reactions_toggle_and_switch(self, client: AsyncClient):
        book_id = (await create_book(client))["bookId"]
        created = await client.post(
            f"/api/books/{book_id}/comments",
            json={"playerId": "p1", "username": "Reader", "text": "Hmm"},
        )
        comment_id = created.json()["comments"][0]["id"]
        url = f"/api/books/{book_id}/comments/{comment_id}/reactions"

        liked = (await client.post(url, json={"playerId": "x", "reaction": "like"})).json()["comments"][0]
        assert "x" in liked["likes"]

        switched = (await client.post(url, json={"playerId": "x", "reaction": "dislike"})).json()["comments"][0]
        assert "x" not in switched["likes"]
        assert switched["dislikes"] == ["x"]

        cleared = (await client.post(url, json={"playerId": "x", "reaction": "dislike"})).json()["comments"][0]
        assert cleared["dislikes"] == []

        invalid = await client.post(url, json={"playerId": "x", "reaction": "love"})
        assert invalid.status_code == 400

        missing = await client.post(
            f"/api/books/{book_id}/comments/9999/reactions",
            json={"playerId": "x", "reaction": "like"},
        )
        assert missing.status_code == 404


class TestXpAPI:
    """Test /api/xp."""

    @pytest.mark.asyncio
    async def test_award_xp_accumulates_and_floors(self, client: AsyncClient):
        first = await client.post("/api/xp", json={"playerId": "p1", "username": "Old", "amount": 10})
        assert first.json() == {"success": True, "xp": 10}

        second = await client.post("/api/xp", json={"playerId": "p1", "username": "New", "amount": 2.9})
        assert second.json()["xp"] == 12

        lookup = (await client.get("/api/xp", params={"playerId": "p1"})).json()
        assert lookup == {"playerId": "p1", "username": "New", "xp": 12}

    @pytest.mark.asyncio
    async def test_unknown_player_has_zero_xp(self, client: AsyncClient):
        lookup = (await client.get("/api/xp", params={"playerId": "ghost"})).json()
        assert lookup["xp"] == 0
        assert lookup["username"] is None

    @pytest.mark.asyncio
    async def test_negative_amount_rejected(self, client: AsyncClient):
        response = await client.post("/api/xp", json={"playerId": "p1", "username": "U", "amount": -1})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_out_of_range_amount_rejected(self, client: AsyncClient):
        too_large = await client.post("/api/xp", json={"playerId": "p1", "username": "U", "amount": 1e20})
        assert too_large.status_code == 400

        infinite = await client.post(
            "/api/xp",
            content='{"playerId": "p1", "username": "U", "amount": Infinity}',
            headers={"Content-Type": "application/json"},
        )
        assert infinite.status_code == 400
        assert infinite.json()["error"]["code"] == "BAD_REQUEST"

        lookup = (await client.get("/api/xp", params={"playerId": "p1"})).json()
        assert lookup["xp"] == 0

    @pytest.mark.asyncio
    async def test_book_read_awards_once_per_day(self, client: AsyncClient):
        body = {"playerId": "p1", "username": "Reader", "bookId": "book-1"}

        first = await client.post("/api/xp/bookread", json=body)
        assert first.json() == {"success": True, "awarded": True, "xp": 5}

        second = await client.post("/api/xp/bookread", json=body)
        assert second.json() == {"success": True, "awarded": False, "xp": 0}

        lookup = (await client.get("/api/xp", params={"playerId": "p1"})).json()
        assert lookup["xp"] == 5

        other_book = await client.post("/api/xp/bookread", json={**body, "bookId": "book-2"})
        assert other_book.json()["awarded"] is True

    @pytest.mark.asyncio
    async def test_xp_leaderboard(self, client: AsyncClient):
        for player, amount in (("a", 5), ("b", 50), ("c", 20)):
            await client.post("/api/xp", json={"playerId": player, "username": player.upper(), "amount": amount})

        board = (await client.get("/api/xp/leaderboard")).json()
        assert [row["playerId"] for row in board] == ["b", "c", "a"]
        assert board[0] == {"playerId": "b", "username": "B", "xp": 50}


class TestPlaytimeAPI:
    """Test /api/playtime."""

    @pytest.mark.asyncio
    async def test_playtime_last_write_wins(self, client: AsyncClient):
        await client.post(
            "/api/playtime",
            json={"playerId": "p1", "minutes": 30, "username": "One", "thumbnail": "t1"},
        )
        response = await client.post(
            "/api/playtime",
            json={"playerId": "p1", "minutes": 12, "username": "Uno"},
        )
        assert response.json() == {"success": True}

        board = (await client.get("/api/playtime/leaderboard")).json()
        assert board == [{"playerId": "p1", "username": "Uno", "thumbnail": None, "minutes": 12}]

    @pytest.mark.asyncio
    async def test_playtime_leaderboard_top_ten(self, client: AsyncClient):
        for index in range(12):
            await client.post("/api/playtime", json={"playerId": f"p{index:02d}", "minutes": index})

        board = (await client.get("/api/playtime/leaderboard")).json()
        assert len(board) == 10
        assert board[0]["minutes"] == 11

    @pytest.mark.asyncio
    async def test_playtime_requires_minutes(self, client: AsyncClient):
        response = await client.post("/api/playtime", json={"playerId": "p1"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_playtime_minutes_out_of_range(self, client: AsyncClient):
        response = await client.post("/api/playtime", json={"playerId": "p1", "minutes": 10**20})
        assert response.status_code == 400

        board = (await client.get("/api/playtime/leaderboard")).json()
        assert board == []


class TestDailyDedup:
    """Test that the day is part of the view and read dedup keys."""

    @pytest.mark.asyncio
    async def test_view_counted_again_next_day(self, client: AsyncClient, session_factory):
        book_id = (await create_book(client))["bookId"]

        async with session_factory() as db:
            assert await engagement.record_view(db, "reader", book_id, day="2026-01-01") == (False, 1)
            assert await engagement.record_view(db, "reader", book_id, day="2026-01-01") == (True, 1)
            assert await engagement.record_view(db, "reader", book_id, day="2026-01-02") == (False, 2)
            assert await engagement.record_view(db, "reader", book_id, day="2026-01-02") == (True, 2)

        book = (await client.get(f"/api/books/{book_id}")).json()
        assert book["views"] == 2

    @pytest.mark.asyncio
    async def test_book_read_rewarded_again_next_day(self, client: AsyncClient, session_factory):
        async with session_factory() as db:
            read = engagement.record_book_read
            assert await read(db, "p1", "Reader", "book-1", day="2026-01-01") == (True, 5)
            assert await read(db, "p1", "Reader", "book-1", day="2026-01-01") == (False, 0)
            assert await read(db, "p1", "Reader", "book-1", day="2026-01-02") == (True, 5)
            assert await read(db, "p1", "Reader", "book-1", day="2026-01-02") == (False, 0)

        lookup = (await client.get("/api/xp", params={"playerId": "p1"})).json()
        assert lookup["xp"] == 10
