"""Turn engine output into the caller-facing response dicts."""
from __future__ import annotations

from typing import Iterable, Optional

from domain.entities import (
    AggregateStats,
    MatchSummary,
    PlayerIdentity,
    PlayerMatchHistory,
    PlayerProfile,
    RankEntry,
    SummonerProfile,
    UNRANKED,
)
from domain.enums import QueueType
from .stats_calculator import performance_level


def format_duration(seconds: int) -> str:
    """``1845`` -> ``"30m 45s"``."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}m {secs}s"


def player_display_name(identity: PlayerIdentity) -> str:
    return f"{identity.game_name}#{identity.tag_line}"


def rank_string(ranks: Iterable[RankEntry], queue: QueueType) -> str:
    for entry in ranks:
        if entry.queue is queue:
            return entry.display
    return UNRANKED


def summary_sentence(display_name: str, stats: AggregateStats) -> str:
    if stats.total_games == 0:
        return f"{display_name} has no recent games."
    return (
        f"{display_name}'s last {stats.total_games} games: "
        f"{stats.wins}W {stats.losses}L (win rate {stats.win_rate_string}), "
        f"most played: {stats.most_played_champion}"
    )


class ResponseAssembler:
    """
    Pure formatting of engine results.

    Nothing here calls out or raises on well-formed input; all numbers come
    straight from the entities and only gain display strings.
    """

    def match_view(self, match: MatchSummary) -> dict:
        view = match.to_dict()
        view['duration'] = format_duration(match.game_duration)
        view['result'] = "Victory" if match.win else "Defeat"
        view['kda_string'] = f"{match.kills}/{match.deaths}/{match.assists}"
        return view

    def stats_view(self, stats: AggregateStats) -> dict:
        view = stats.to_dict()
        view['win_rate_string'] = stats.win_rate_string
        view['kda_string'] = stats.kda_string
        view['performance_level'] = performance_level(stats.win_rate)
        return view

    def _summoner_view(self, summoner: Optional[SummonerProfile], ranks: Iterable[RankEntry]) -> Optional[dict]:
        if summoner is None:
            return None
        ranks = list(ranks)
        return {
            'summoner_level': summoner.summoner_level,
            'profile_icon_id': summoner.profile_icon_id,
            'solo_rank': rank_string(ranks, QueueType.RANKED_SOLO_5x5),
            'flex_rank': rank_string(ranks, QueueType.RANKED_FLEX_SR),
            'ranks': [entry.to_dict() for entry in ranks],
        }

    def assemble_history(self, history: PlayerMatchHistory) -> dict:
        display_name = player_display_name(history.identity)
        return {
            'player_display_name': display_name,
            'identity': history.identity.to_dict(),
            'summoner': self._summoner_view(history.summoner, history.ranks),
            'matches': [self.match_view(m) for m in history.matches],
            'stats': self.stats_view(history.stats),
            'summary': summary_sentence(display_name, history.stats),
            'failed_count': history.failed_count,
            'failures': [f.to_dict() for f in history.failures],
        }

    def assemble_profile(self, profile: PlayerProfile) -> dict:
        return {
            'player_display_name': player_display_name(profile.identity),
            'identity': profile.identity.to_dict(),
            'summoner': profile.summoner.to_dict(),
            'summoner_level': profile.summoner.summoner_level,
            'solo_rank': rank_string(profile.ranks, QueueType.RANKED_SOLO_5x5),
            'flex_rank': rank_string(profile.ranks, QueueType.RANKED_FLEX_SR),
            'ranks': [entry.to_dict() for entry in profile.ranks],
            'recent_match_ids': list(profile.recent_match_ids),
            'top_champions': [c.to_dict() for c in profile.top_champions],
        }

    def assemble_match(self, identity: PlayerIdentity, match: MatchSummary) -> dict:
        return {
            'player_display_name': player_display_name(identity),
            'identity': identity.to_dict(),
            'match': self.match_view(match),
        }
