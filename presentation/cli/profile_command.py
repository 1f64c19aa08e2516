from __future__ import annotations

from typing import Optional, Sequence

from application.use_cases import GetPlayerProfileUseCase
from .base_command import RiotIdCommand, split_riot_id
from .runtime import open_runtime


def render_profile(response: dict) -> str:
    lines = [
        f"=== {response['player_display_name']} ({response['platform']}) ===",
        f"Level {response['summoner_level']}",
        f"Solo/Duo: {response['solo_rank']}",
        f"Flex:     {response['flex_rank']}",
    ]
    for entry in response["ranks"]:
        lines.append(f"  {entry['queue_name']}: {entry['wins']}W {entry['losses']}L ({entry['win_rate']:.1f}%)")
    if response["top_champions"]:
        lines.append("Top champions:")
        for champ in response["top_champions"]:
            lines.append(f"  {champ['champion_name']:<14} M{champ['level']}  {champ['points']:,} pts")
    if response["recent_match_ids"]:
        lines.append("Recent matches: " + ", ".join(response["recent_match_ids"]))
    return "\n".join(lines)


class ProfileCommand(RiotIdCommand):
    """``profile``: summoner level, ranks and most-mastered champions."""

    service_name = "profile-cli"

    async def run(self, riot_id: Sequence[str], platform: Optional[str] = None) -> int:
        game_name, tag_line = split_riot_id(riot_id)
        self._log.info(f"profile {game_name}#{tag_line} platform={platform}")
        async with open_runtime(self.settings, self.api) as (service, cache):
            response = await GetPlayerProfileUseCase(service, cache=cache).execute(game_name, tag_line, platform)
        self.emit(response, render_profile)
        return 0
