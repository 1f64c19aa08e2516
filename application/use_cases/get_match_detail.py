"""Use case: one match seen from one player's side."""
from __future__ import annotations

from typing import Optional

from application.services import MatchHistoryService, ResponseAssembler
from domain.exceptions import InvalidRequestError


class GetMatchDetailUseCase:
    def __init__(self, service: MatchHistoryService, assembler: Optional[ResponseAssembler] = None):
        self.service = service
        self.assembler = assembler or ResponseAssembler()

    async def execute(self, game_name: str, tag_line: str, match_id: str) -> dict:
        match_id = (match_id or "").strip()
        if not match_id:
            raise InvalidRequestError("match id must not be empty")
        identity, match = await self.service.get_match_for_player(game_name, tag_line, match_id)
        return self.assembler.assemble_match(identity, match)
