"""Argument parsing and exit-code mapping for ``main.py``."""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from config import Settings, settings as default_settings
from core.logging.logger import get_logger
from domain.exceptions import (
    AuthError,
    ConfigurationError,
    InvalidRequestError,
    MatchHistoryError,
    NotFoundError,
    RateLimitedError,
)
from domain.interfaces import IRiotAPIClient
from .history_command import HistoryCommand
from .match_command import MatchCommand
from .profile_command import ProfileCommand

EXIT_OK = 0
EXIT_INVALID = 2
EXIT_NOT_FOUND = 3
EXIT_RATE_LIMITED = 4
EXIT_CREDENTIALS = 5
EXIT_UPSTREAM = 6


def exit_code_for(exc: MatchHistoryError) -> int:
    if isinstance(exc, InvalidRequestError):
        return EXIT_INVALID
    if isinstance(exc, NotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(exc, RateLimitedError):
        return EXIT_RATE_LIMITED
    if isinstance(exc, (AuthError, ConfigurationError)):
        return EXIT_CREDENTIALS
    return EXIT_UPSTREAM


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="match-history", description="League of Legends match history lookup")
    parser.add_argument("--json", action="store_true", dest="json_out", help="print the response as JSON")
    parser.add_argument("--log-level", default=None, help="TRACE, DEBUG, INFO, SUCCESS, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    history = sub.add_parser("history", help="recent matches with aggregate stats")
    history.add_argument("riot_id", nargs="+", metavar="RIOT_ID", help="GAME_NAME TAG_LINE or Name#TAG")
    history.add_argument("--count", type=int, default=None, help="number of matches (clamped to 1..MAX_MATCH_COUNT)")
    platform = history.add_mutually_exclusive_group()
    platform.add_argument("--platform", default=None, help="platform shorthand, e.g. kr, na, euw")
    platform.add_argument("--no-profile", action="store_true", help="skip summoner and rank lookup")

    profile = sub.add_parser("profile", help="summoner level, ranks and top champions")
    profile.add_argument("riot_id", nargs="+", metavar="RIOT_ID", help="GAME_NAME TAG_LINE or Name#TAG")
    profile.add_argument("--platform", default=None, help="platform shorthand, e.g. kr, na, euw")

    match = sub.add_parser("match", help="one match from a player's side")
    match.add_argument("args", nargs="+", metavar="ARG", help="GAME_NAME TAG_LINE MATCH_ID or Name#TAG MATCH_ID")
    return parser


async def run_command(
    args: argparse.Namespace,
    *,
    settings: Settings = default_settings,
    api: Optional[IRiotAPIClient] = None,
) -> int:
    """Run one parsed command; domain errors become a message and an exit code."""
    log = get_logger(__name__, service="cli")
    options = dict(json_out=args.json_out, settings=settings, api=api)
    try:
        if args.command == "history":
            platform = None if args.no_profile else (args.platform or settings.RIOT_DEFAULT_PLATFORM)
            return await HistoryCommand(**options).run(args.riot_id, args.count, platform)
        if args.command == "profile":
            return await ProfileCommand(**options).run(args.riot_id, args.platform)
        return await MatchCommand(**options).run(args.args)
    except MatchHistoryError as exc:
        code = exit_code_for(exc)
        log.error(f"{type(exc).__name__}: {exc.message} (exit {code})")
        print(f"Error: {exc.message}", file=sys.stderr)
        return code


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    return build_parser().parse_args(list(argv))
