"""Presentation CLI exports."""
from .history_command import HistoryCommand
from .profile_command import ProfileCommand
from .match_command import MatchCommand
from .parser import build_parser, exit_code_for, parse_args, run_command

__all__ = [
    "HistoryCommand",
    "ProfileCommand",
    "MatchCommand",
    "build_parser",
    "exit_code_for",
    "parse_args",
    "run_command",
]
