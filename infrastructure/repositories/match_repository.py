"""Match repository implementation."""
import logging
from typing import List

from domain.entities import MatchSummary
from domain.exceptions import NotFoundError, UpstreamError
from domain.interfaces import IMatchRepository, IRiotAPIClient
from domain.lookups import CHAMPIONS, QUEUES, NameLookup
from .payload import optional_int, require, require_int

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(
        self,
        api_client: IRiotAPIClient,
        champions: NameLookup = CHAMPIONS,
        queues: NameLookup = QUEUES,
    ):
        self.api_client = api_client
        self.champions = champions
        self.queues = queues

    async def fetch_recent_match_ids(self, puuid: str, count: int) -> List[str]:
        """Most recent first, in upstream order. A player with no games yields []."""
        try:
            match_ids = await self.api_client.get_match_ids_by_puuid(puuid, count)
        except NotFoundError:
            return []
        return [str(m) for m in match_ids][:count]

    async def fetch_match_detail(self, match_id: str, target_puuid: str) -> MatchSummary:
        """
        Get a match summarised for one participant.

        Raises:
            NotFoundError: the match does not exist, or ``target_puuid`` did not play in it
            UpstreamError: the payload lacks required fields
        """
        data = await self.api_client.get_match_by_id(match_id)
        return self._parse_match(match_id, data, target_puuid)

    def _parse_match(self, match_id: str, data: dict, target_puuid: str) -> MatchSummary:
        info = require(data, "info", "match")
        participants = require(info, "participants", "match")
        if not isinstance(participants, list):
            raise UpstreamError("Riot API returned an invalid match record", details={"field": "participants"})

        player = next(
            (p for p in participants if isinstance(p, dict) and p.get("puuid") == target_puuid),
            None,
        )
        if player is None:
            logger.error(f"Participant {target_puuid[:8]} missing from match {match_id}")
            raise NotFoundError(
                f"Player is not a participant of match {match_id}",
                details={"match_id": match_id},
            )

        champion_id = require_int(player, "championId", "participant")
        win = require(player, "win", "participant")
        if not isinstance(win, bool):
            raise UpstreamError("Riot API returned an invalid participant record", details={"field": "win"})
        queue_id = optional_int(info, "queueId")
        return MatchSummary(
            match_id=match_id,
            game_creation=require_int(info, "gameCreation", "match"),
            game_duration=require_int(info, "gameDuration", "match"),
            queue_id=queue_id,
            queue_name=self.queues.name_for(queue_id),
            champion_id=champion_id,
            champion_name=self.champions.name_for(champion_id),
            win=win,
            kills=require_int(player, "kills", "participant"),
            deaths=require_int(player, "deaths", "participant"),
            assists=require_int(player, "assists", "participant"),
            cs=optional_int(player, "totalMinionsKilled") + optional_int(player, "neutralMinionsKilled"),
            total_damage=optional_int(player, "totalDamageDealtToChampions"),
            gold_earned=optional_int(player, "goldEarned"),
        )
