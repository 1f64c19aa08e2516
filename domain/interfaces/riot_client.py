"""Raw Riot API transport interface.

Implementations return decoded JSON (dicts / lists) and raise the
``domain.exceptions`` taxonomy for upstream failures. Turning JSON into
entities is the repositories' job.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IRiotAPIClient(ABC):

    @abstractmethod
    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Dict[str, Any]:
        """GET /riot/account/v1/accounts/by-riot-id/{gameName}/{tagLine}"""

    @abstractmethod
    async def get_summoner_by_puuid(self, platform: str, puuid: str) -> Dict[str, Any]:
        """GET /lol/summoner/v4/summoners/by-puuid/{puuid}"""

    @abstractmethod
    async def get_league_entries_by_summoner(self, platform: str, summoner_id: str) -> List[Dict[str, Any]]:
        """GET /lol/league/v4/entries/by-summoner/{summonerId}; [] when unranked."""

    @abstractmethod
    async def get_match_ids_by_puuid(self, puuid: str, count: int) -> List[str]:
        """GET /lol/match/v5/matches/by-puuid/{puuid}/ids; most recent first."""

    @abstractmethod
    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        """GET /lol/match/v5/matches/{matchId}"""

    @abstractmethod
    async def get_champion_masteries(self, platform: str, puuid: str, count: int) -> List[Dict[str, Any]]:
        """GET /lol/champion-mastery/v4/champion-masteries/by-puuid/{puuid}/top"""
