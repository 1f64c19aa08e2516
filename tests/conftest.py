# tests/conftest.py

"""Pytest configuration and fixtures."""
import asyncio
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from config import Settings
from infrastructure import FixtureRiotAPIClient, RateLimiter, RiotAPIClient


def make_participant(puuid: str, champion_id: int = 103, win: bool = True,
                     kills: int = 0, deaths: int = 0, assists: int = 0, **extra: Any) -> Dict[str, Any]:
    participant = {
        "puuid": puuid,
        "championId": champion_id,
        "win": win,
        "kills": kills,
        "deaths": deaths,
        "assists": assists,
        "totalMinionsKilled": 150,
        "neutralMinionsKilled": 10,
        "totalDamageDealtToChampions": 18000,
        "goldEarned": 11000,
    }
    participant.update(extra)
    return participant


def make_match(participants: List[Dict[str, Any]], queue_id: int = 420,
               duration: int = 1845, created: int = 1718000000000) -> Dict[str, Any]:
    return {
        "metadata": {"participants": [p["puuid"] for p in participants]},
        "info": {
            "gameCreation": created,
            "gameDuration": duration,
            "queueId": queue_id,
            "participants": participants,
        },
    }


def two_game_dataset() -> Dict[str, Any]:
    """Player P1 with M1 (Ahri win 5/2/3) and M2 (Ahri loss 1/4/2)."""
    return {
        "accounts": {"p one#kr1": {"puuid": "P1", "gameName": "P One", "tagLine": "KR1"}},
        "summoners": {"P1": {"id": "S1", "puuid": "P1", "profileIconId": 7, "summonerLevel": 120}},
        "league_entries": {"S1": []},
        "match_ids": {"P1": ["M1", "M2"]},
        "matches": {
            "M1": make_match([make_participant("P1", 103, True, 5, 2, 3), make_participant("X", 238, False)]),
            "M2": make_match([make_participant("X", 238, True), make_participant("P1", 103, False, 1, 4, 2)]),
        },
        "masteries": {"P1": []},
    }


class ScriptedRiotClient(FixtureRiotAPIClient):
    """Fixture client that can also fail or stall specific lookups.

    ``errors`` and ``delays`` are keyed like ``calls``: ``"matches:M2"``.
    """

    def __init__(self, dataset: Optional[Dict[str, Any]] = None,
                 errors: Optional[Dict[str, Exception]] = None,
                 delays: Optional[Dict[str, float]] = None):
        super().__init__(dataset)
        self.errors = errors or {}
        self.delays = delays or {}
        self.in_flight = 0
        self.max_in_flight = 0

    def _lookup(self, table: str, key: str, not_found: str) -> Any:
        call = f"{table}:{key}"
        if call in self.errors:
            self.calls.append(call)
            raise self.errors[call]
        return super()._lookup(table, key, not_found)

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(f"matches:{match_id}", 0))
            return await super().get_match_by_id(match_id)
        finally:
            self.in_flight -= 1


@pytest.fixture
def dataset() -> Dict[str, Any]:
    return two_game_dataset()


@pytest.fixture
def scripted_client(dataset) -> ScriptedRiotClient:
    return ScriptedRiotClient(dataset)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    s = Settings()
    s.RIOT_API_KEY = "RGAPI-test"
    s.CLIENT_MODE = "fixture"
    s.FIXTURE_FILE = ""
    s.CACHE_BACKEND = "none"
    s.CHAMPION_DATA_FILE = ""
    s.MATCH_FAILURE_POLICY = "fail_fast"
    s.MATCH_FETCH_CONCURRENCY = 4
    s.DEFAULT_MATCH_COUNT = 5
    s.MAX_MATCH_COUNT = 10
    s.RIOT_DEFAULT_PLATFORM = "kr"
    s.CACHE_DB = tmp_path / "cache.sqlite"
    return s


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], RiotAPIClient]:
    """Build a RiotAPIClient whose requests are answered by ``handler`` (no network, no pacing)."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> RiotAPIClient:
        return RiotAPIClient(
            "RGAPI-test",
            kwargs.pop("regional_route", "asia"),
            transport=httpx.MockTransport(handler),
            rate_limiter=RateLimiter(windows=()),
            **kwargs,
        )

    return _make
