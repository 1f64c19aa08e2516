"""Riot Games API client."""
import importlib.util
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config import settings
from core.logging import timed
from domain.enums import RegionalRoute, platform_host
from domain.exceptions import (
    AuthError,
    ConfigurationError,
    NotFoundError,
    RateLimitedError,
    UpstreamError,
)
from domain.interfaces import IRiotAPIClient
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

_BODY_LOG_LIMIT = 500


def _segment(value: str) -> str:
    """Percent-encode one path segment (spaces, '#', '/', non-ASCII)."""
    return quote(value, safe="")


def _http2_available() -> bool:
    return importlib.util.find_spec("h2") is not None


class RiotAPIClient(IRiotAPIClient):
    """Asynchronous Riot API client.

    One instance per process or per request; use as an async context
    manager so the underlying ``httpx.AsyncClient`` is closed. Every call
    either returns decoded JSON or raises a ``RiotAPIError`` subclass.
    """

    def __init__(
        self,
        api_key: str,
        regional_route: RegionalRoute | str = RegionalRoute.ASIA,
        *,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
        match_id_ceiling: Optional[int] = None,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = (api_key or "").strip()
        if not self.api_key:
            raise ConfigurationError("RIOT_API_KEY is empty; refusing to start the Riot API client")
        if isinstance(regional_route, str):
            regional_route = RegionalRoute.from_string(regional_route)
        self.regional_route = regional_route
        self.timeout = httpx.Timeout(
            timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            connect=connect_timeout if connect_timeout is not None else settings.CONNECT_TIMEOUT,
        )
        self.match_id_ceiling = match_id_ceiling or settings.MATCH_ID_CEILING
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter.from_limits(
            settings.RATE_LIMIT_PER_1_SEC, settings.RATE_LIMIT_PER_2_MIN
        )
        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key, "Accept": "application/json"},
            http2=self._transport is None and _http2_available(),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _regional_url(self) -> str:
        return self.regional_route.host

    @timed("riot-get")
    async def _get(
        self,
        url: str,
        endpoint: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        not_found: str = "Resource not found",
    ) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be entered with 'async with' before use")

        await self.rate_limiter.acquire()
        logger.debug(f"GET {url} params={params or {}}")
        try:
            response = await self.session.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.error(f"Timeout calling {endpoint} endpoint: {exc!r}")
            raise UpstreamError(f"Riot API {endpoint} request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error(f"Network error calling {endpoint} endpoint: {exc!r}")
            raise UpstreamError(f"Riot API {endpoint} request failed") from exc

        status = response.status_code

        if status == 200:
            try:
                return response.json()
            except ValueError as exc:
                logger.error(f"Undecodable JSON from {endpoint} endpoint")
                logger.debug(f"Body: {response.text[:_BODY_LOG_LIMIT]}")
                raise UpstreamError(f"Riot API {endpoint} returned an unreadable response", status) from exc

        if status in (401, 403):
            logger.error(
                f"{status} credential rejected by Riot API ({endpoint}) - check RIOT_API_KEY",
                extra={"status_code": status},
            )
            raise AuthError("Riot API rejected the configured API key", status)

        if status == 404:
            logger.info(f"404 from {endpoint} endpoint", extra={"status_code": status})
            raise NotFoundError(not_found, status)

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            logger.warning(f"429 rate-limited on {endpoint} (Retry-After={retry_after})", extra={"status_code": status})
            raise RateLimitedError(
                "Riot API rate limit reached, try again later",
                retry_after=seconds,
                details={"endpoint": endpoint},
            )

        logger.error(f"HTTP {status} from {endpoint} endpoint", extra={"status_code": status})
        logger.debug(f"Body: {response.text[:_BODY_LOG_LIMIT]}")
        raise UpstreamError(f"Riot API {endpoint} request failed with status {status}", status)

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Dict[str, Any]:
        url = (
            f"{self._regional_url()}/riot/account/v1/accounts/by-riot-id/"
            f"{_segment(game_name)}/{_segment(tag_line)}"
        )
        return await self._get(url, "account", not_found=f"No such Riot ID: {game_name}#{tag_line}")

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_puuid(self, platform: str, puuid: str) -> Dict[str, Any]:
        url = f"{platform_host(platform)}/lol/summoner/v4/summoners/by-puuid/{_segment(puuid)}"
        return await self._get(url, "summoner", not_found="Summoner not found on this platform")

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_summoner(self, platform: str, summoner_id: str) -> List[Dict[str, Any]]:
        url = f"{platform_host(platform)}/lol/league/v4/entries/by-summoner/{_segment(summoner_id)}"
        result = await self._get(url, "league", not_found="No league entries")
        return result if isinstance(result, list) else []

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(self, puuid: str, count: int) -> List[str]:
        url = f"{self._regional_url()}/lol/match/v5/matches/by-puuid/{_segment(puuid)}/ids"
        params = {"start": 0, "count": max(1, min(count, self.match_id_ceiling))}
        result = await self._get(url, "match", params=params, not_found="No matches for this player")
        if not isinstance(result, list):
            raise UpstreamError("Riot API match list response was not a list")
        return result

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        url = f"{self._regional_url()}/lol/match/v5/matches/{_segment(match_id)}"
        return await self._get(url, "match", not_found=f"Match {match_id} not found")

    # ── Champion Mastery API ───────────────────────────────────────────

    async def get_champion_masteries(self, platform: str, puuid: str, count: int) -> List[Dict[str, Any]]:
        url = (
            f"{platform_host(platform)}/lol/champion-mastery/v4/champion-masteries/"
            f"by-puuid/{_segment(puuid)}/top"
        )
        result = await self._get(url, "mastery", params={"count": max(1, min(count, 10))}, not_found="No mastery data")
        return result if isinstance(result, list) else []
