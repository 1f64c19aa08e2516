"""Canned Riot API payloads for ``CLIENT_MODE=fixture`` (offline demos and tests)."""
from typing import Any, Dict

FIXTURE_PUUID = "fixture-puuid-0001"
FIXTURE_SUMMONER_ID = "fixture-summoner-0001"


def _participant(puuid: str, champion_id: int, win: bool, k: int, d: int, a: int, cs: int) -> Dict[str, Any]:
    return {
        "puuid": puuid,
        "championId": champion_id,
        "win": win,
        "kills": k,
        "deaths": d,
        "assists": a,
        "totalMinionsKilled": cs,
        "neutralMinionsKilled": cs // 10,
        "totalDamageDealtToChampions": 1200 * k + 400 * a + 5000,
        "goldEarned": 300 * k + 150 * a + 6000,
    }


def _match(match_id: str, created: int, duration: int, queue_id: int, me: Dict[str, Any]) -> Dict[str, Any]:
    others = [_participant(f"other-{match_id}-{i}", 1 + i, not me["win"], 2, 3, 4, 120) for i in range(9)]
    return {
        "metadata": {"matchId": match_id, "participants": [me["puuid"]] + [p["puuid"] for p in others]},
        "info": {
            "gameCreation": created,
            "gameDuration": duration,
            "queueId": queue_id,
            "participants": [me] + others,
        },
    }


DEFAULT_FIXTURES: Dict[str, Any] = {
    "accounts": {
        "fixture player#dev": {"puuid": FIXTURE_PUUID, "gameName": "Fixture Player", "tagLine": "DEV"},
    },
    "summoners": {
        FIXTURE_PUUID: {
            "id": FIXTURE_SUMMONER_ID,
            "accountId": "fixture-account-0001",
            "puuid": FIXTURE_PUUID,
            "name": "Fixture Player",
            "profileIconId": 4568,
            "revisionDate": 1718000000000,
            "summonerLevel": 287,
        },
    },
    "league_entries": {
        FIXTURE_SUMMONER_ID: [
            {"queueType": "RANKED_SOLO_5x5", "tier": "EMERALD", "rank": "II",
             "leaguePoints": 61, "wins": 112, "losses": 98},
        ],
    },
    "match_ids": {
        FIXTURE_PUUID: ["KR_7000000003", "KR_7000000002", "KR_7000000001"],
    },
    "matches": {
        "KR_7000000003": _match("KR_7000000003", 1718003600000, 1825, 420,
                                _participant(FIXTURE_PUUID, 103, True, 9, 2, 7, 201)),
        "KR_7000000002": _match("KR_7000000002", 1717990000000, 1540, 420,
                                _participant(FIXTURE_PUUID, 238, False, 4, 6, 3, 174)),
        "KR_7000000001": _match("KR_7000000001", 1717980000000, 1312, 450,
                                _participant(FIXTURE_PUUID, 103, True, 12, 5, 21, 48)),
    },
    "masteries": {
        FIXTURE_PUUID: [
            {"championId": 103, "championLevel": 7, "championPoints": 412345, "lastPlayTime": 1718003600000,
             "championPointsSinceLastLevel": 390745, "championPointsUntilNextLevel": 0},
            {"championId": 238, "championLevel": 5, "championPoints": 98000, "lastPlayTime": 1717990000000,
             "championPointsSinceLastLevel": 76400, "championPointsUntilNextLevel": 0},
        ],
    },
}
