"""Fold a list of match summaries into aggregate statistics."""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from domain.entities import AggregateStats, MatchSummary, NO_CHAMPION


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """(K + A) / D, or K + A when the player never died."""
    if deaths > 0:
        return (kills + assists) / deaths
    return float(kills + assists)


def most_played_champion(champion_names: Iterable[str]) -> str:
    """Most frequent name; on a tie, the one that reached the top count first."""
    counts: Dict[str, int] = {}
    best: Optional[str] = None
    best_count = 0
    for name in champion_names:
        counts[name] = counts.get(name, 0) + 1
        if counts[name] > best_count:
            best, best_count = name, counts[name]
    return best if best is not None else NO_CHAMPION


def performance_level(win_rate: float) -> str:
    if win_rate >= 70:
        return "Excellent"
    if win_rate >= 60:
        return "Good"
    if win_rate >= 50:
        return "Average"
    if win_rate >= 40:
        return "Below average"
    return "Needs work"


def calculate_stats(matches: Sequence[MatchSummary]) -> AggregateStats:
    """
    Roll up a player's matches.

    KDA is computed over summed kills, deaths and assists, not as the mean of
    per-game ratios. An empty input gives all-zero stats and "None" as the
    most played champion.
    """
    total_games = len(matches)
    if total_games == 0:
        return AggregateStats.empty()

    wins = sum(1 for m in matches if m.win)
    total_kills = sum(m.kills for m in matches)
    total_deaths = sum(m.deaths for m in matches)
    total_assists = sum(m.assists for m in matches)

    return AggregateStats(
        total_games=total_games,
        wins=wins,
        losses=total_games - wins,
        win_rate=wins / total_games * 100,
        average_kda=kda_ratio(total_kills, total_deaths, total_assists),
        total_kills=total_kills,
        total_deaths=total_deaths,
        total_assists=total_assists,
        average_kills=total_kills / total_games,
        average_deaths=total_deaths / total_games,
        average_assists=total_assists / total_games,
        most_played_champion=most_played_champion(m.champion_name for m in matches),
    )
