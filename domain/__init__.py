"""Domain layer - Business entities, enums, lookups, interfaces and errors."""
from .entities import (
    PlayerIdentity, SummonerProfile, RankEntry, ChampionMastery,
    MatchSummary, AggregateStats, MatchFetchFailure, PlayerMatchHistory, PlayerProfile,
)
from .enums import RegionalRoute, QueueType, MatchFailurePolicy, resolve_platform_route
from .lookups import NameLookup, CHAMPIONS, QUEUES

__all__ = [
    # Entities
    'PlayerIdentity',
    'SummonerProfile',
    'RankEntry',
    'ChampionMastery',
    'MatchSummary',
    'AggregateStats',
    'MatchFetchFailure',
    'PlayerMatchHistory',
    'PlayerProfile',
    # Enums
    'RegionalRoute',
    'QueueType',
    'MatchFailurePolicy',
    'resolve_platform_route',
    # Lookups
    'NameLookup',
    'CHAMPIONS',
    'QUEUES',
]
