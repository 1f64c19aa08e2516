# tests/test_cli.py

"""CLI parsing, output and exit codes."""
import json

import pytest

import main as entrypoint
from config import settings as global_settings
from domain.exceptions import AuthError, RateLimitedError, UpstreamError
from infrastructure import FixtureRiotAPIClient
from presentation.cli import exit_code_for, parse_args, run_command
from presentation.cli.base_command import split_riot_id
from tests.conftest import ScriptedRiotClient

ACCOUNT_CALL = "accounts:fixture player#dev"


async def run(argv, settings, api=None) -> int:
    return await run_command(parse_args(argv), settings=settings, api=api or FixtureRiotAPIClient())


def test_split_riot_id_forms():
    assert split_riot_id(["Hide on bush", "KR1"]) == ("Hide on bush", "KR1")
    assert split_riot_id(["Hide on bush#KR1"]) == ("Hide on bush", "KR1")
    assert split_riot_id(["a#b#c"]) == ("a#b", "c")


@pytest.mark.asyncio
async def test_history_text_output(test_settings, capsys):
    assert await run(["history", "Fixture Player", "DEV"], test_settings) == 0

    out = capsys.readouterr().out
    assert "=== Fixture Player#DEV ===" in out
    assert "Solo/Duo: EMERALD II (61LP)" in out
    assert "Fixture Player#DEV's last 3 games: 2W 1L (win rate 66.7%), most played: Ahri" in out


@pytest.mark.asyncio
async def test_history_json_output(test_settings, capsys):
    code = await run(["--json", "history", "Fixture Player#DEV", "--count", "2", "--no-profile"], test_settings)

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["summoner"] is None
    assert len(payload["matches"]) == 2


@pytest.mark.asyncio
async def test_profile_and_match_commands(test_settings, capsys):
    assert await run(["profile", "Fixture Player#DEV", "--platform", "kr"], test_settings) == 0
    assert "Level 287" in capsys.readouterr().out

    assert await run(["match", "Fixture Player", "DEV", "KR_7000000002"], test_settings) == 0
    out = capsys.readouterr().out
    assert "played Zed: Defeat" in out
    assert "duration 25m 40s" in out


@pytest.mark.asyncio
async def test_unknown_player_exits_3(test_settings, capsys):
    assert await run(["history", "Nobody", "NA1"], test_settings) == 3
    assert "No such Riot ID" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_malformed_riot_id_exits_2(test_settings):
    assert await run(["history", "NoTagHere"], test_settings) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "code"),
    [(RateLimitedError("slow down", retry_after=3), 4), (AuthError("key rejected", 401), 5),
     (UpstreamError("bad gateway", 502), 6)],
)
async def test_upstream_errors_map_to_exit_codes(test_settings, error, code):
    client = ScriptedRiotClient(errors={ACCOUNT_CALL: error})
    assert await run(["history", "Fixture Player#DEV"], test_settings, client) == code


@pytest.mark.asyncio
async def test_missing_key_in_http_mode_exits_5(test_settings, capsys):
    test_settings.CLIENT_MODE = "http"
    test_settings.RIOT_API_KEY = ""

    code = await run_command(parse_args(["history", "A#B"]), settings=test_settings)

    assert code == 5
    assert "RIOT_API_KEY" in capsys.readouterr().err


def test_exit_code_for_unknown_domain_error():
    assert exit_code_for(UpstreamError("x")) == 6


def test_main_runs_against_fixtures(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(global_settings, "CLIENT_MODE", "fixture")
    monkeypatch.setattr(global_settings, "CACHE_BACKEND", "none")
    monkeypatch.setattr(global_settings, "FIXTURE_FILE", "")
    monkeypatch.setattr(global_settings, "LOG_DIR", tmp_path / "logs")

    code = entrypoint.main(["--json", "match", "Fixture Player#DEV", "KR_7000000003"])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["match"]["champion_name"] == "Ahri"
    assert (tmp_path / "logs" / "match_history.jsonl").exists()
