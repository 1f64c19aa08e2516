# tests/test_riot_client.py

"""Tests for the httpx-backed Riot API client: routing, encoding and status mapping."""
import httpx
import pytest

from domain.exceptions import (
    AuthError,
    ConfigurationError,
    NotFoundError,
    RateLimitedError,
    UpstreamError,
)
from infrastructure import RiotAPIClient


def test_empty_api_key_is_rejected_at_construction():
    with pytest.raises(ConfigurationError):
        RiotAPIClient("  \n")


@pytest.mark.asyncio
async def test_account_lookup_percent_encodes_riot_id_and_sends_token(make_http_client):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"puuid": "P1", "gameName": "Hide on bush", "tagLine": "KR1"})

    async with make_http_client(handler) as api:
        data = await api.get_account_by_riot_id("Hide on bush", "KR1")

    assert data["puuid"] == "P1"
    request = seen[0]
    assert request.url.host == "asia.api.riotgames.com"
    assert request.url.raw_path == b"/riot/account/v1/accounts/by-riot-id/Hide%20on%20bush/KR1"
    assert request.headers["X-Riot-Token"] == "RGAPI-test"


@pytest.mark.asyncio
async def test_reserved_characters_in_name_are_encoded(make_http_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"puuid": "P1"})

    async with make_http_client(handler) as api:
        await api.get_account_by_riot_id("a/b#c", "T 1")

    assert seen[0].url.raw_path.endswith(b"/by-riot-id/a%2Fb%23c/T%201")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("platform", "host"),
    [("kr", "kr.api.riotgames.com"), ("EUW", "euw1.api.riotgames.com"),
     ("na", "na1.api.riotgames.com"), ("oce", "oce.api.riotgames.com")],
)
async def test_summoner_lookup_uses_platform_route(make_http_client, platform, host):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "S1", "puuid": "P1", "profileIconId": 1, "summonerLevel": 30})

    async with make_http_client(handler) as api:
        await api.get_summoner_by_puuid(platform, "P1")

    assert seen[0].url.host == host
    assert seen[0].url.path == "/lol/summoner/v4/summoners/by-puuid/P1"


@pytest.mark.asyncio
async def test_match_id_count_is_clamped_to_ceiling(make_http_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=["KR_1", "KR_2"])

    async with make_http_client(handler, match_id_ceiling=20) as api:
        ids = await api.get_match_ids_by_puuid("P1", 50)

    assert ids == ["KR_1", "KR_2"]
    assert seen[0].url.params["start"] == "0"
    assert seen[0].url.params["count"] == "20"
    assert seen[0].url.path == "/lol/match/v5/matches/by-puuid/P1/ids"


@pytest.mark.asyncio
async def test_europe_route_for_match_detail(make_http_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"info": {}})

    async with make_http_client(handler, regional_route="europe") as api:
        await api.get_match_by_id("EUW1_123")

    assert seen[0].url.host == "europe.api.riotgames.com"
    assert seen[0].url.path == "/lol/match/v5/matches/EUW1_123"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "expected"),
    [(401, AuthError), (403, AuthError), (404, NotFoundError), (500, UpstreamError), (503, UpstreamError)],
)
async def test_status_codes_map_to_error_kinds(make_http_client, status, expected):
    async with make_http_client(lambda request: httpx.Response(status, json={"status": {}})) as api:
        with pytest.raises(expected) as exc_info:
            await api.get_account_by_riot_id("Nobody", "NA1")

    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_rate_limited_carries_retry_after(make_http_client):
    def handler(request):
        return httpx.Response(429, headers={"Retry-After": "7"})

    async with make_http_client(handler) as api:
        with pytest.raises(RateLimitedError) as exc_info:
            await api.get_match_by_id("KR_1")

    assert exc_info.value.retry_after == 7
    assert exc_info.value.http_status == 429


@pytest.mark.asyncio
async def test_upstream_body_is_not_leaked_into_message(make_http_client):
    def handler(request):
        return httpx.Response(500, text="secret internal trace")

    async with make_http_client(handler) as api:
        with pytest.raises(UpstreamError) as exc_info:
            await api.get_match_by_id("KR_1")

    assert "secret" not in exc_info.value.message


@pytest.mark.asyncio
async def test_undecodable_json_is_upstream_error(make_http_client):
    def handler(request):
        return httpx.Response(200, text="<html>not json</html>")

    async with make_http_client(handler) as api:
        with pytest.raises(UpstreamError):
            await api.get_match_by_id("KR_1")


@pytest.mark.asyncio
async def test_transport_failure_is_upstream_error(make_http_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with make_http_client(handler) as api:
        with pytest.raises(UpstreamError):
            await api.get_account_by_riot_id("A", "B")


@pytest.mark.asyncio
async def test_timeout_is_upstream_error(make_http_client):
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    async with make_http_client(handler) as api:
        with pytest.raises(UpstreamError):
            await api.get_match_by_id("KR_1")


@pytest.mark.asyncio
async def test_mastery_count_is_clamped(make_http_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    async with make_http_client(handler) as api:
        assert await api.get_champion_masteries("kr", "P1", 50) == []

    assert seen[0].url.params["count"] == "10"
    assert seen[0].url.path.endswith("/champion-masteries/by-puuid/P1/top")


@pytest.mark.asyncio
async def test_client_must_be_entered_before_use():
    api = RiotAPIClient("RGAPI-test")
    with pytest.raises(RuntimeError):
        await api.get_match_by_id("KR_1")
