"""Application services root exports."""
from .stats_calculator import calculate_stats, kda_ratio, most_played_champion, performance_level
from .match_history_service import MatchHistoryService
from .response_assembler import ResponseAssembler, format_duration, player_display_name

__all__ = [
    "calculate_stats",
    "kda_ratio",
    "most_played_champion",
    "performance_level",
    "MatchHistoryService",
    "ResponseAssembler",
    "format_duration",
    "player_display_name",
]
