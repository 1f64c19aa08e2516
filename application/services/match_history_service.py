"""Aggregation engine: chains the Riot resources behind one player lookup."""
from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Tuple

from config import settings
from core.logging import get_logger, request_context
from domain.entities import (
    ChampionMastery,
    MatchFetchFailure,
    MatchSummary,
    PlayerIdentity,
    PlayerMatchHistory,
    PlayerProfile,
    RankEntry,
    SummonerProfile,
)
from domain.enums import MatchFailurePolicy
from domain.exceptions import AuthError, MatchHistoryError, RiotAPIError
from domain.interfaces import IAccountRepository, IMatchRepository, ISummonerRepository
from .stats_calculator import calculate_stats


class MatchHistoryService:
    """
    Runs the lookup pipeline as separate stages:

        identity -> summoner -> ranks -> match ids -> match details -> stats

    Each stage takes the previous stage's output, so stages can be exercised
    on their own against fake repositories. Identity and summoner failures
    are fatal; rank and mastery failures degrade to empty lists; per-match
    failures follow ``failure_policy``.
    """

    def __init__(
        self,
        account_repo: IAccountRepository,
        summoner_repo: ISummonerRepository,
        match_repo: IMatchRepository,
        *,
        failure_policy: MatchFailurePolicy | str | None = None,
        concurrency: Optional[int] = None,
    ):
        self.account_repo = account_repo
        self.summoner_repo = summoner_repo
        self.match_repo = match_repo
        policy = failure_policy if failure_policy is not None else settings.MATCH_FAILURE_POLICY
        if isinstance(policy, str):
            policy = MatchFailurePolicy.from_string(policy)
        self.failure_policy: MatchFailurePolicy = policy
        self.concurrency = max(1, concurrency if concurrency is not None else settings.MATCH_FETCH_CONCURRENCY)
        self._log = get_logger(__name__, service="aggregation")

    # ------------------------------------------------------------------ #
    # Stages
    # ------------------------------------------------------------------ #

    async def resolve_identity(self, game_name: str, tag_line: str) -> PlayerIdentity:
        return await self.account_repo.resolve_identity(game_name, tag_line)

    async def load_summoner(self, platform: str, identity: PlayerIdentity) -> SummonerProfile:
        return await self.summoner_repo.fetch_summoner(platform, identity.puuid)

    async def load_ranks(self, platform: str, summoner: SummonerProfile) -> List[RankEntry]:
        try:
            return await self.summoner_repo.fetch_rank_entries(platform, summoner.summoner_id)
        except RiotAPIError as exc:
            self._log.warning(f"rank-lookup-failed, continuing unranked: {exc.message}")
            return []

    async def load_top_champions(self, platform: str, identity: PlayerIdentity, count: int) -> List[ChampionMastery]:
        try:
            return await self.summoner_repo.fetch_champion_mastery(platform, identity.puuid, count)
        except RiotAPIError as exc:
            self._log.warning(f"mastery-lookup-failed: {exc.message}")
            return []

    async def load_match_ids(self, identity: PlayerIdentity, count: int) -> List[str]:
        match_ids = await self.match_repo.fetch_recent_match_ids(identity.puuid, count)
        self._log.info(f"match-ids {len(match_ids)} for {identity.puuid[:8]}")
        return match_ids

    async def _fetch_one(self, sem: asyncio.Semaphore, identity: PlayerIdentity, match_id: str) -> MatchSummary:
        async with sem:
            with request_context(match_id=match_id):
                return await self.match_repo.fetch_match_detail(match_id, identity.puuid)

    async def load_matches(
        self, identity: PlayerIdentity, match_ids: Sequence[str]
    ) -> Tuple[List[MatchSummary], List[MatchFetchFailure]]:
        """
        Fetch every match detail with at most ``concurrency`` requests in flight.

        Results keep the order of ``match_ids`` (most recent first). Under
        FAIL_FAST the earliest failing match id wins and outstanding fetches
        are cancelled. Under PARTIAL failures are collected, except AuthError
        which always aborts.
        """
        if not match_ids:
            return [], []

        sem = asyncio.Semaphore(self.concurrency)
        tasks = [asyncio.create_task(self._fetch_one(sem, identity, mid)) for mid in match_ids]
        try:
            if self.failure_policy is MatchFailurePolicy.FAIL_FAST:
                return [await task for task in tasks], []
            outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            # reap all tasks, including ones that failed after the first error
            await asyncio.gather(*tasks, return_exceptions=True)

        matches: List[MatchSummary] = []
        failures: List[MatchFetchFailure] = []
        for match_id, outcome in zip(match_ids, outcomes):
            if isinstance(outcome, AuthError):
                raise outcome
            if isinstance(outcome, MatchHistoryError):
                self._log.warning(f"match-skipped {match_id}: {outcome.message}")
                failures.append(MatchFetchFailure(match_id=match_id, reason=outcome.message))
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                matches.append(outcome)
        return matches, failures

    # ------------------------------------------------------------------ #
    # Composite operations
    # ------------------------------------------------------------------ #

    async def get_player_match_history(
        self,
        game_name: str,
        tag_line: str,
        count: int,
        platform: Optional[str] = None,
    ) -> PlayerMatchHistory:
        """
        Resolve a Riot ID and summarise its ``count`` most recent matches.

        With ``platform`` the summoner profile and rank entries are included.
        """
        with request_context(riot_id=f"{game_name}#{tag_line}", platform=platform):
            identity = await self.resolve_identity(game_name, tag_line)

            summoner: Optional[SummonerProfile] = None
            ranks: List[RankEntry] = []
            if platform:
                summoner = await self.load_summoner(platform, identity)
                ranks = await self.load_ranks(platform, summoner)

            match_ids = await self.load_match_ids(identity, count)
            matches, failures = await self.load_matches(identity, match_ids)
            stats = calculate_stats(matches)

            if failures:
                self._log.warning(f"history-partial {len(matches)} ok, {len(failures)} failed")
            else:
                self._log.success(f"history-complete {stats.total_games} games, {stats.win_rate:.1f}% wins")

            return PlayerMatchHistory(
                identity=identity,
                matches=tuple(matches),
                stats=stats,
                summoner=summoner,
                ranks=tuple(ranks),
                failures=tuple(failures),
            )

    async def get_player_profile(
        self,
        game_name: str,
        tag_line: str,
        platform: str,
        recent_matches: Optional[int] = None,
        top_champions: Optional[int] = None,
    ) -> PlayerProfile:
        """Account, summoner, ranks, recent match ids and top champions.

        Only identity and summoner are required; the rest is best-effort.
        """
        recent_matches = recent_matches or settings.PROFILE_RECENT_MATCHES
        top_champions = top_champions or settings.PROFILE_TOP_CHAMPIONS
        with request_context(riot_id=f"{game_name}#{tag_line}", platform=platform):
            identity = await self.resolve_identity(game_name, tag_line)
            summoner = await self.load_summoner(platform, identity)
            ranks = await self.load_ranks(platform, summoner)
            try:
                match_ids = await self.load_match_ids(identity, recent_matches)
            except RiotAPIError as exc:
                self._log.warning(f"recent-matches-failed: {exc.message}")
                match_ids = []
            champions = await self.load_top_champions(platform, identity, top_champions)
            return PlayerProfile(
                identity=identity,
                summoner=summoner,
                ranks=tuple(ranks),
                recent_match_ids=tuple(match_ids),
                top_champions=tuple(champions),
            )

    async def get_match_for_player(
        self, game_name: str, tag_line: str, match_id: str
    ) -> Tuple[PlayerIdentity, MatchSummary]:
        with request_context(riot_id=f"{game_name}#{tag_line}", match_id=match_id):
            identity = await self.resolve_identity(game_name, tag_line)
            match = await self.match_repo.fetch_match_detail(match_id, identity.puuid)
            return identity, match
