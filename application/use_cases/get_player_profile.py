"""Use case: summoner profile with ranks and top champions."""
from __future__ import annotations

import logging
import time
from typing import Optional

from application.services import MatchHistoryService, ResponseAssembler
from config import settings
from domain.interfaces import IResponseCache
from infrastructure.cache import NullResponseCache
from ._common import cache_key, normalise_platform

logger = logging.getLogger(__name__)


class GetPlayerProfileUseCase:
    def __init__(
        self,
        service: MatchHistoryService,
        assembler: Optional[ResponseAssembler] = None,
        cache: Optional[IResponseCache] = None,
    ):
        self.service = service
        self.assembler = assembler or ResponseAssembler()
        self.cache = cache if cache is not None else NullResponseCache()

    async def execute(self, game_name: str, tag_line: str, platform: Optional[str] = None) -> dict:
        platform = normalise_platform(platform) or normalise_platform(settings.RIOT_DEFAULT_PLATFORM)
        key = cache_key("profile", game_name, tag_line, platform)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"cache hit {key}")
            cached['cached'] = True
            return cached

        profile = await self.service.get_player_profile(game_name, tag_line, platform)
        response = self.assembler.assemble_profile(profile)
        response['platform'] = platform
        response['fetched_at'] = int(time.time())
        self.cache.set(key, response)
        response['cached'] = False
        return response
