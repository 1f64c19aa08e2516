"""Offline Riot API client backed by fixed payloads."""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from domain.exceptions import NotFoundError
from domain.interfaces import IRiotAPIClient
from .fixture_data import DEFAULT_FIXTURES

logger = logging.getLogger(__name__)


class FixtureRiotAPIClient(IRiotAPIClient):
    """Serves canned payloads with the same interface and errors as ``RiotAPIClient``.

    Dataset keys: ``accounts`` (``"name#tag"`` lower-cased), ``summoners``
    and ``match_ids`` and ``masteries`` (by puuid), ``league_entries`` (by
    summoner id), ``matches`` (by match id). Anything missing is a 404.
    """

    def __init__(self, dataset: Optional[Dict[str, Any]] = None):
        self.dataset = copy.deepcopy(dataset if dataset is not None else DEFAULT_FIXTURES)
        self.calls: List[str] = []

    @classmethod
    def from_file(cls, path: Path | str) -> "FixtureRiotAPIClient":
        with open(path, encoding="utf-8") as fh:
            return cls(json.load(fh))

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        return None

    def _lookup(self, table: str, key: str, not_found: str) -> Any:
        self.calls.append(f"{table}:{key}")
        try:
            return copy.deepcopy(self.dataset[table][key])
        except KeyError:
            logger.info(f"fixture miss {table}:{key}")
            raise NotFoundError(not_found, 404) from None

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Dict[str, Any]:
        key = f"{game_name}#{tag_line}".lower()
        return self._lookup("accounts", key, f"No such Riot ID: {game_name}#{tag_line}")

    async def get_summoner_by_puuid(self, platform: str, puuid: str) -> Dict[str, Any]:
        return self._lookup("summoners", puuid, "Summoner not found on this platform")

    async def get_league_entries_by_summoner(self, platform: str, summoner_id: str) -> List[Dict[str, Any]]:
        return self._lookup("league_entries", summoner_id, "No league entries")

    async def get_match_ids_by_puuid(self, puuid: str, count: int) -> List[str]:
        return self._lookup("match_ids", puuid, "No matches for this player")[:count]

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        return self._lookup("matches", match_id, f"Match {match_id} not found")

    async def get_champion_masteries(self, platform: str, puuid: str, count: int) -> List[Dict[str, Any]]:
        return self._lookup("masteries", puuid, "No mastery data")[:count]
