from __future__ import annotations

from typing import Optional, Sequence

from application.use_cases import GetPlayerMatchHistoryUseCase
from .base_command import RiotIdCommand, split_riot_id
from .runtime import open_runtime


def render_history(response: dict) -> str:
    lines = [f"=== {response['player_display_name']} ==="]
    summoner = response.get("summoner")
    if summoner:
        lines.append(f"Level {summoner['summoner_level']}")
        lines.append(f"Solo/Duo: {summoner['solo_rank']}")
        lines.append(f"Flex:     {summoner['flex_rank']}")
    lines.append("")
    for m in response["matches"]:
        lines.append(
            f"{m['result']:<8} {m['champion_name']:<14} {m['kda_string']:<9} "
            f"{m['duration']:>8}  {m['queue_name']}"
        )
    if not response["matches"]:
        lines.append("(no recent matches)")
    stats = response["stats"]
    lines.append("")
    lines.append(
        f"KDA {stats['average_kda']:.2f} ({stats['kda_string']})  "
        f"win rate {stats['win_rate_string']}  [{stats['performance_level']}]"
    )
    lines.append(response["summary"])
    if response.get("failed_count"):
        lines.append(f"Warning: {response['failed_count']} match(es) could not be loaded")
    return "\n".join(lines)


class HistoryCommand(RiotIdCommand):
    """``history``: recent matches with aggregate stats."""

    service_name = "history-cli"

    async def run(self, riot_id: Sequence[str], count: Optional[int] = None, platform: Optional[str] = None) -> int:
        game_name, tag_line = split_riot_id(riot_id)
        self._log.info(f"history {game_name}#{tag_line} count={count} platform={platform}")
        async with open_runtime(self.settings, self.api) as (service, cache):
            use_case = GetPlayerMatchHistoryUseCase(
                service,
                cache=cache,
                default_count=self.settings.DEFAULT_MATCH_COUNT,
                max_count=self.settings.MAX_MATCH_COUNT,
            )
            response = await use_case.execute(game_name, tag_line, count, platform)
        self.emit(response, render_history)
        return 0
