"""Use case: a player's recent match history with aggregate stats."""
from __future__ import annotations

import logging
import time
from typing import Optional

from application.services import MatchHistoryService, ResponseAssembler
from config import settings
from domain.interfaces import IResponseCache
from infrastructure.cache import NullResponseCache
from ._common import cache_key, clamp_count, normalise_platform

logger = logging.getLogger(__name__)


class GetPlayerMatchHistoryUseCase:
    """
    Clamp the requested count, serve from cache when possible, otherwise run
    the aggregation engine and assemble the response.

    Partial results (some matches failed) are returned but never cached.
    """

    def __init__(
        self,
        service: MatchHistoryService,
        assembler: Optional[ResponseAssembler] = None,
        cache: Optional[IResponseCache] = None,
        *,
        default_count: Optional[int] = None,
        max_count: Optional[int] = None,
    ):
        self.service = service
        self.assembler = assembler or ResponseAssembler()
        self.cache = cache if cache is not None else NullResponseCache()
        self.default_count = default_count or settings.DEFAULT_MATCH_COUNT
        self.max_count = max_count or settings.MAX_MATCH_COUNT

    async def execute(
        self,
        game_name: str,
        tag_line: str,
        count: Optional[int] = None,
        platform: Optional[str] = None,
    ) -> dict:
        count = clamp_count(count, self.default_count, self.max_count)
        platform = normalise_platform(platform)
        key = cache_key("history", game_name, tag_line, count, platform)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"cache hit {key}")
            cached['cached'] = True
            return cached

        history = await self.service.get_player_match_history(game_name, tag_line, count, platform)
        response = self.assembler.assemble_history(history)
        response['requested_count'] = count
        response['fetched_at'] = int(time.time())
        if not history.is_partial:
            self.cache.set(key, response)
        response['cached'] = False
        return response
