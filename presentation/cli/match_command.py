from __future__ import annotations

from typing import Sequence

from application.use_cases import GetMatchDetailUseCase
from domain.exceptions import InvalidRequestError
from .base_command import RiotIdCommand, split_riot_id
from .runtime import open_runtime


def render_match(response: dict) -> str:
    m = response["match"]
    return "\n".join([
        f"=== {m['match_id']} ({m['queue_name']}) ===",
        f"{response['player_display_name']} played {m['champion_name']}: {m['result']}",
        f"Played at {m['played_at']}, duration {m['duration']}",
        f"K/D/A {m['kda_string']} (KDA {m['kda']:.2f})",
        f"CS {m['cs']} ({m['cs_per_minute']:.1f}/min), damage {m['total_damage']:,}, gold {m['gold_earned']:,}",
    ])


class MatchCommand(RiotIdCommand):
    """``match``: one match from the given player's side."""

    service_name = "match-cli"

    async def run(self, args: Sequence[str]) -> int:
        if len(args) < 2:
            raise InvalidRequestError("expected a Riot ID followed by a match id")
        game_name, tag_line = split_riot_id(args[:-1])
        match_id = args[-1]
        self._log.info(f"match {game_name}#{tag_line} {match_id}")
        async with open_runtime(self.settings, self.api) as (service, _cache):
            response = await GetMatchDetailUseCase(service).execute(game_name, tag_line, match_id)
        self.emit(response, render_match)
        return 0
