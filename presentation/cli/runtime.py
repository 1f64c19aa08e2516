"""Builds the object graph for one CLI invocation from ``settings``."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from application.services import MatchHistoryService
from config import Settings, settings as default_settings
from domain.interfaces import IResponseCache, IRiotAPIClient
from domain.lookups import CHAMPIONS, QUEUES, NameLookup
from infrastructure import (
    AccountRepository,
    FixtureRiotAPIClient,
    MatchRepository,
    MemoryResponseCache,
    NullResponseCache,
    RateLimiter,
    RiotAPIClient,
    SqliteResponseCache,
    SummonerRepository,
)

logger = logging.getLogger(__name__)


def build_api_client(settings: Settings = default_settings) -> IRiotAPIClient:
    if settings.CLIENT_MODE == "fixture":
        if settings.FIXTURE_FILE:
            return FixtureRiotAPIClient.from_file(settings.FIXTURE_FILE)
        return FixtureRiotAPIClient()
    return RiotAPIClient(
        settings.RIOT_API_KEY,
        settings.RIOT_REGIONAL_ROUTE,
        timeout=settings.REQUEST_TIMEOUT,
        connect_timeout=settings.CONNECT_TIMEOUT,
        match_id_ceiling=settings.MATCH_ID_CEILING,
        rate_limiter=RateLimiter.from_limits(
            settings.RATE_LIMIT_PER_1_SEC, settings.RATE_LIMIT_PER_2_MIN
        ),
    )


def build_cache(settings: Settings = default_settings) -> IResponseCache:
    if settings.CACHE_BACKEND == "memory":
        return MemoryResponseCache(settings.CACHE_TTL_SECONDS)
    if settings.CACHE_BACKEND == "sqlite":
        return SqliteResponseCache(settings.CACHE_DB, settings.CACHE_TTL_SECONDS)
    return NullResponseCache()


def build_champion_lookup(settings: Settings = default_settings) -> NameLookup:
    if settings.CHAMPION_DATA_FILE:
        return CHAMPIONS.with_data_dragon(settings.CHAMPION_DATA_FILE)
    return CHAMPIONS


def build_service(api: IRiotAPIClient, settings: Settings = default_settings) -> MatchHistoryService:
    champions = build_champion_lookup(settings)
    return MatchHistoryService(
        AccountRepository(api),
        SummonerRepository(api, champions),
        MatchRepository(api, champions, QUEUES),
        failure_policy=settings.MATCH_FAILURE_POLICY,
        concurrency=settings.MATCH_FETCH_CONCURRENCY,
    )


@asynccontextmanager
async def open_runtime(
    settings: Settings = default_settings,
    api: Optional[IRiotAPIClient] = None,
) -> AsyncIterator[tuple[MatchHistoryService, IResponseCache]]:
    """Validate settings, open the API client and yield ``(service, cache)``."""
    settings.validate()
    api = api or build_api_client(settings)
    cache = build_cache(settings)
    logger.debug(f"runtime client={type(api).__name__} cache={type(cache).__name__}")
    try:
        async with api:
            yield build_service(api, settings), cache
    finally:
        cache.close()
