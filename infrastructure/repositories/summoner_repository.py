"""Summoner, league and mastery repository implementation."""
import logging
from typing import List

from domain.entities import ChampionMastery, RankEntry, SummonerProfile, UNRANKED
from domain.enums import QueueType
from domain.interfaces import IRiotAPIClient, ISummonerRepository
from domain.exceptions import NotFoundError, UpstreamError
from domain.lookups import CHAMPIONS, NameLookup
from .payload import optional_int, require, require_int

logger = logging.getLogger(__name__)


class SummonerRepository(ISummonerRepository):
    """Repository for per-platform player data using the Riot API."""

    def __init__(self, api_client: IRiotAPIClient, champions: NameLookup = CHAMPIONS):
        self.api_client = api_client
        self.champions = champions

    async def fetch_summoner(self, platform: str, puuid: str) -> SummonerProfile:
        data = await self.api_client.get_summoner_by_puuid(platform, puuid)
        return SummonerProfile(
            summoner_id=str(require(data, "id", "summoner")),
            puuid=str(data.get("puuid") or puuid),
            profile_icon_id=require_int(data, "profileIconId", "summoner"),
            summoner_level=require_int(data, "summonerLevel", "summoner"),
            account_id=str(data.get("accountId") or ""),
            name=str(data.get("name") or ""),
            revision_date=optional_int(data, "revisionDate"),
        )

    async def fetch_rank_entries(self, platform: str, summoner_id: str) -> List[RankEntry]:
        """
        Get league entries for a summoner.

        No ranked history is a normal outcome: both an empty array and a 404
        map to []. Entries without a tier are normalised to UNRANKED.
        """
        try:
            entries = await self.api_client.get_league_entries_by_summoner(platform, summoner_id)
        except NotFoundError:
            return []
        if not entries:
            logger.info(f"No ranked entries for summoner {summoner_id[:8]}")
            return []
        return [self._parse_rank_entry(entry) for entry in entries]

    def _parse_rank_entry(self, entry: dict) -> RankEntry:
        if not isinstance(entry, dict):
            raise UpstreamError("Riot API returned an invalid league entry")
        raw_queue = str(entry.get("queueType") or "")
        tier = entry.get("tier")
        return RankEntry(
            queue=QueueType.from_api(raw_queue),
            tier=str(tier) if tier else UNRANKED,
            division=str(entry.get("rank") or "") if tier else "",
            league_points=optional_int(entry, "leaguePoints"),
            wins=optional_int(entry, "wins"),
            losses=optional_int(entry, "losses"),
            queue_type=raw_queue,
        )

    async def fetch_champion_mastery(self, platform: str, puuid: str, count: int) -> List[ChampionMastery]:
        try:
            entries = await self.api_client.get_champion_masteries(platform, puuid, count)
        except NotFoundError:
            return []
        masteries = []
        for entry in entries or []:
            champion_id = require_int(entry, "championId", "champion mastery")
            masteries.append(ChampionMastery(
                champion_id=champion_id,
                champion_name=self.champions.name_for(champion_id),
                level=optional_int(entry, "championLevel"),
                points=optional_int(entry, "championPoints"),
                last_play_time=optional_int(entry, "lastPlayTime"),
                points_since_last_level=optional_int(entry, "championPointsSinceLastLevel"),
                points_until_next_level=optional_int(entry, "championPointsUntilNextLevel"),
            ))
        return masteries
