"""Presentation layer - User interfaces."""
from .cli import HistoryCommand, ProfileCommand, MatchCommand, run_command

__all__ = [
    "HistoryCommand",
    "ProfileCommand",
    "MatchCommand",
    "run_command",
]
