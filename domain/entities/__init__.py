"""Domain entities."""
from .player import PlayerIdentity, SummonerProfile
from .rank_entry import RankEntry, UNRANKED
from .champion_mastery import ChampionMastery
from .match_summary import MatchSummary
from .aggregate_stats import AggregateStats, NO_CHAMPION
from .match_history import MatchFetchFailure, PlayerMatchHistory, PlayerProfile

__all__ = [
    'PlayerIdentity',
    'SummonerProfile',
    'RankEntry',
    'UNRANKED',
    'ChampionMastery',
    'MatchSummary',
    'AggregateStats',
    'NO_CHAMPION',
    'MatchFetchFailure',
    'PlayerMatchHistory',
    'PlayerProfile',
]
