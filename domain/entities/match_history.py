"""Outputs of the aggregation engine and the profile lookup."""
from dataclasses import dataclass, field
from typing import Optional

from .aggregate_stats import AggregateStats
from .champion_mastery import ChampionMastery
from .match_summary import MatchSummary
from .player import PlayerIdentity, SummonerProfile
from .rank_entry import RankEntry


@dataclass(frozen=True)
class MatchFetchFailure:
    """A match id whose detail could not be fetched (partial policy only)."""

    match_id: str
    reason: str

    def to_dict(self) -> dict:
        return {'match_id': self.match_id, 'reason': self.reason}


@dataclass(frozen=True)
class PlayerMatchHistory:
    identity: PlayerIdentity
    matches: tuple[MatchSummary, ...]
    stats: AggregateStats
    summoner: Optional[SummonerProfile] = None
    ranks: tuple[RankEntry, ...] = ()
    failures: tuple[MatchFetchFailure, ...] = ()

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def is_partial(self) -> bool:
        return bool(self.failures)


@dataclass(frozen=True)
class PlayerProfile:
    identity: PlayerIdentity
    summoner: SummonerProfile
    ranks: tuple[RankEntry, ...] = ()
    recent_match_ids: tuple[str, ...] = ()
    top_champions: tuple[ChampionMastery, ...] = field(default_factory=tuple)
