"""Repository interfaces: typed access to Riot resources."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import ChampionMastery, MatchSummary, PlayerIdentity, RankEntry, SummonerProfile


class IAccountRepository(ABC):
    """Interface for Riot account lookups."""

    @abstractmethod
    async def resolve_identity(self, game_name: str, tag_line: str) -> PlayerIdentity:
        """Resolve a Riot ID to its account; raises NotFoundError if absent."""
        pass


class ISummonerRepository(ABC):
    """Interface for summoner, league and mastery data."""

    @abstractmethod
    async def fetch_summoner(self, platform: str, puuid: str) -> SummonerProfile:
        """Get the summoner profile for a PUUID on a platform."""
        pass

    @abstractmethod
    async def fetch_rank_entries(self, platform: str, summoner_id: str) -> List[RankEntry]:
        """Get every league entry; an unranked player yields []."""
        pass

    @abstractmethod
    async def fetch_champion_mastery(self, platform: str, puuid: str, count: int) -> List[ChampionMastery]:
        """Get the top ``count`` champion masteries."""
        pass


class IMatchRepository(ABC):
    """Interface for match data."""

    @abstractmethod
    async def fetch_recent_match_ids(self, puuid: str, count: int) -> List[str]:
        """Get recent match ids, most recent first."""
        pass

    @abstractmethod
    async def fetch_match_detail(self, match_id: str, target_puuid: str) -> MatchSummary:
        """Get one match summarised for ``target_puuid``."""
        pass
