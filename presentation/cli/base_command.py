from __future__ import annotations

import json
from typing import Callable, Optional, Sequence, Tuple

from config import Settings, settings as default_settings
from core.logging.logger import StructuredLogger, get_logger
from domain.exceptions import InvalidRequestError
from domain.interfaces import IRiotAPIClient


def split_riot_id(parts: Sequence[str]) -> Tuple[str, str]:
    """Accept ``["Name", "TAG"]`` or a single ``"Name#TAG"``."""
    if len(parts) == 2:
        return parts[0], parts[1]
    if len(parts) == 1 and "#" in parts[0]:
        name, _, tag = parts[0].rpartition("#")
        return name, tag
    raise InvalidRequestError("expected a Riot ID as 'GAME_NAME TAG_LINE' or 'Name#TAG'")


class RiotIdCommand:
    """Shared plumbing for commands that look a player up by Riot ID."""

    service_name = "cli"

    def __init__(
        self,
        *,
        json_out: bool = False,
        settings: Settings = default_settings,
        api: Optional[IRiotAPIClient] = None,
        out: Callable[[str], None] = print,
    ) -> None:
        self.json_out = json_out
        self.settings = settings
        self.api = api
        self._out = out
        self._log: StructuredLogger = get_logger(__name__, service=self.service_name)

    def emit(self, response: dict, render: Callable[[dict], str]) -> None:
        if self.json_out:
            self._out(json.dumps(response, ensure_ascii=False, indent=2))
        else:
            self._out(render(response))
