# tests/test_repositories.py

"""Decoding raw payloads into entities."""
import pytest

from domain.entities import UNRANKED
from domain.enums import QueueType
from domain.exceptions import InvalidRequestError, NotFoundError, UpstreamError
from domain.lookups import CHAMPIONS
from infrastructure import AccountRepository, FixtureRiotAPIClient, MatchRepository, SummonerRepository
from tests.conftest import make_match, make_participant


@pytest.mark.asyncio
async def test_resolve_identity_uses_upstream_capitalisation(scripted_client):
    identity = await AccountRepository(scripted_client).resolve_identity("  p one ", "#kr1")

    assert identity.puuid == "P1"
    assert identity.riot_id == "P One#KR1"


@pytest.mark.asyncio
async def test_blank_riot_id_never_reaches_upstream(scripted_client):
    with pytest.raises(InvalidRequestError):
        await AccountRepository(scripted_client).resolve_identity("   ", "KR1")
    assert scripted_client.calls == []


@pytest.mark.asyncio
async def test_account_without_puuid_is_upstream_error():
    client = FixtureRiotAPIClient({"accounts": {"a#b": {"gameName": "a"}}})
    with pytest.raises(UpstreamError):
        await AccountRepository(client).resolve_identity("a", "b")


@pytest.mark.asyncio
async def test_rank_entry_without_tier_is_unranked():
    client = FixtureRiotAPIClient({"league_entries": {"S1": [
        {"queueType": "RANKED_FLEX_SR", "tier": None, "rank": "IV", "wins": 1, "losses": 2},
        {"queueType": "RANKED_SOLO_5x5", "tier": "GOLD", "rank": "II", "leaguePoints": 45, "wins": 30, "losses": 20},
    ]}})

    flex, solo = await SummonerRepository(client).fetch_rank_entries("kr", "S1")

    assert flex.tier == UNRANKED
    assert flex.division == ""
    assert flex.display == UNRANKED
    assert solo.queue is QueueType.RANKED_SOLO_5x5
    assert solo.display == "GOLD II (45LP)"
    assert solo.win_rate == pytest.approx(60.0)


@pytest.mark.asyncio
async def test_unknown_queue_type_collapses_to_other():
    client = FixtureRiotAPIClient({"league_entries": {"S1": [{"queueType": "CHERRY", "tier": "SILVER", "rank": "I"}]}})

    (entry,) = await SummonerRepository(client).fetch_rank_entries("kr", "S1")

    assert entry.queue is QueueType.OTHER
    assert entry.to_dict()["queue_type"] == "CHERRY"


@pytest.mark.asyncio
@pytest.mark.parametrize("dataset", [{"league_entries": {"S1": []}}, {"league_entries": {}}])
async def test_no_ranked_history_is_an_empty_list(dataset):
    assert await SummonerRepository(FixtureRiotAPIClient(dataset)).fetch_rank_entries("kr", "S1") == []


@pytest.mark.asyncio
async def test_fetch_summoner_maps_fields(scripted_client):
    summoner = await SummonerRepository(scripted_client).fetch_summoner("kr", "P1")

    assert summoner.summoner_id == "S1"
    assert summoner.summoner_level == 120
    assert summoner.profile_icon_id == 7


@pytest.mark.asyncio
async def test_missing_summoner_is_not_found(scripted_client):
    with pytest.raises(NotFoundError):
        await SummonerRepository(scripted_client).fetch_summoner("kr", "nobody")


@pytest.mark.asyncio
async def test_champion_mastery_resolves_names():
    client = FixtureRiotAPIClient({"masteries": {"P1": [
        {"championId": 157, "championLevel": 7, "championPoints": 250000},
        {"championId": 99999, "championLevel": 1, "championPoints": 100},
    ]}})

    masteries = await SummonerRepository(client, CHAMPIONS).fetch_champion_mastery("kr", "P1", 3)

    assert [m.champion_name for m in masteries] == ["Yasuo", "Champion 99999"]
    assert masteries[0].points == 250000


@pytest.mark.asyncio
async def test_match_detail_is_scoped_to_target_player(scripted_client):
    summary = await MatchRepository(scripted_client).fetch_match_detail("M2", "P1")

    assert summary.match_id == "M2"
    assert summary.win is False
    assert (summary.kills, summary.deaths, summary.assists) == (1, 4, 2)
    assert summary.champion_name == "Ahri"
    assert summary.queue_name == "Ranked Solo/Duo"
    assert summary.cs == 160


@pytest.mark.asyncio
async def test_player_absent_from_match_is_not_found(scripted_client):
    with pytest.raises(NotFoundError):
        await MatchRepository(scripted_client).fetch_match_detail("M1", "someone-else")


@pytest.mark.asyncio
async def test_unknown_ids_get_fallback_labels():
    client = FixtureRiotAPIClient({"matches": {
        "M9": make_match([make_participant("P1", champion_id=99999)], queue_id=1700),
    }})

    summary = await MatchRepository(client).fetch_match_detail("M9", "P1")

    assert summary.champion_name == "Champion 99999"
    assert summary.queue_name == "Other Queue"


@pytest.mark.asyncio
async def test_participant_missing_required_field_is_upstream_error():
    participant = make_participant("P1")
    del participant["kills"]
    client = FixtureRiotAPIClient({"matches": {"M1": make_match([participant])}})

    with pytest.raises(UpstreamError):
        await MatchRepository(client).fetch_match_detail("M1", "P1")


@pytest.mark.asyncio
async def test_optional_participant_fields_default_to_zero():
    participant = make_participant("P1")
    for key in ("totalMinionsKilled", "neutralMinionsKilled", "totalDamageDealtToChampions", "goldEarned"):
        del participant[key]
    client = FixtureRiotAPIClient({"matches": {"M1": make_match([participant])}})

    summary = await MatchRepository(client).fetch_match_detail("M1", "P1")

    assert (summary.cs, summary.total_damage, summary.gold_earned) == (0, 0, 0)


@pytest.mark.asyncio
async def test_player_without_matches_gets_empty_id_list():
    assert await MatchRepository(FixtureRiotAPIClient({"match_ids": {}})).fetch_recent_match_ids("P1", 5) == []


@pytest.mark.asyncio
async def test_non_boolean_win_flag_is_upstream_error():
    client = FixtureRiotAPIClient({"matches": {"M1": make_match([make_participant("P1", win="false")])}})

    with pytest.raises(UpstreamError) as excinfo:
        await MatchRepository(client).fetch_match_detail("M1", "P1")

    assert excinfo.value.details == {"field": "win"}
