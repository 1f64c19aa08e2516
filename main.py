"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str]) -> int:
    # Lazy import keeps argparse errors from touching logging setup
    from presentation.cli import parse_args, run_command

    args = parse_args(argv)
    bootstrap_logging(
        service="match-history",
        level=args.log_level or settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="match_history.jsonl",
    )
    try:
        return asyncio.run(run_command(args))
    finally:
        shutdown_logging()


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
