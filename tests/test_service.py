"""
Tests for the stats service pipeline (fetch -> normalize) against a stub upstream.
"""

import pytest
from conftest import BATTING_PATH, RANKINGS_PATH, make_batting_rows

from softball_stats.providers.base import InvalidCategory
from softball_stats.services.stats import SoftballStatsService


@pytest.fixture
def service(ncaa_client):
    return SoftballStatsService(client=ncaa_client)


class TestGetStats:

    async def test_leaderboard_from_all_pages(self, service, upstream):
        upstream.routes[BATTING_PATH] = {
            "updated": "Through Games MAY. 14, 2025",
            "pages": 3,
            "data": make_batting_rows(50, start=1),
        }
        upstream.routes[f"{BATTING_PATH}/p2"] = {"data": make_batting_rows(50, start=51)}
        upstream.routes[f"{BATTING_PATH}/p3"] = {"data": make_batting_rows(40, start=101)}

        board = await service.get_stats("batting")

        assert len(upstream.requests) == 3
        assert len(board.leaders) == 50
        assert board.category == "Batting Average"
        assert board.updated == "Through Games MAY. 14, 2025"
        assert board.leaders[0].value == 0.4
        assert board.leaders[-1].player.name == "Player 50"

    async def test_invalid_category_makes_no_requests(self, service, upstream):
        with pytest.raises(InvalidCategory):
            await service.get_stats("not-a-real-category")

        assert upstream.requests == []

    async def test_two_calls_are_spaced_by_rate_limiter(self, service, upstream, fake_clock):
        upstream.routes["/stats/softball/d1/current/individual/1088"] = {"data": []}

        await service.get_stats("hits")
        first = service.client.rate_limiter.last_request
        await service.get_stats("hits")
        second = service.client.rate_limiter.last_request

        assert second - first >= 1.0


class TestGetRankings:

    async def test_normalized_rankings(self, service, upstream):
        upstream.routes[RANKINGS_PATH] = {
            "title": "NFCA Division I Top 25",
            "updated": "May 12, 2025",
            "data": [
                {"RANK": "1", " SCHOOL": "Texas", "RECORD": "45-8", "POINTS": "800", "PREVIOUS": "2"},
                {"RANK": "2", "TEAM": "Oklahoma", "RECORD": "44-9", "POINTS": "770", "PREVIOUS RANK": "1"},
            ],
        }

        rankings = await service.get_rankings()

        assert rankings.title == "NFCA Division I Top 25"
        assert rankings.updated == "May 12, 2025"
        assert [row["COLLEGE"] for row in rankings.data] == ["Texas", "Oklahoma"]
        assert [row["PREVIOUS RANK"] for row in rankings.data] == ["2", "1"]

    async def test_rankings_defaults(self, service, upstream):
        upstream.routes[RANKINGS_PATH] = {"data": "unavailable"}

        rankings = await service.get_rankings()

        assert rankings.title == "NCAA Division I Softball Rankings"
        assert rankings.updated
        assert rankings.data == []
