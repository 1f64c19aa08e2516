"""Player account and per-platform summoner profile."""
from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerIdentity:
    """A Riot account resolved from its Riot ID."""

    puuid: str
    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        """Display form, e.g. ``Hide on bush#KR1``."""
        return f"{self.game_name}#{self.tag_line}"

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'game_name': self.game_name,
            'tag_line': self.tag_line,
        }


@dataclass(frozen=True)
class SummonerProfile:
    """Progression snapshot of an account on one platform."""

    summoner_id: str
    puuid: str
    profile_icon_id: int
    summoner_level: int
    account_id: str = ""
    name: str = ""
    revision_date: int = 0  # Unix timestamp milliseconds

    def to_dict(self) -> dict:
        return {
            'summoner_id': self.summoner_id,
            'account_id': self.account_id,
            'puuid': self.puuid,
            'name': self.name,
            'profile_icon_id': self.profile_icon_id,
            'summoner_level': self.summoner_level,
            'revision_date': self.revision_date,
        }
