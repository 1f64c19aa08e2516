"""One finished game from the point of view of a single player."""
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class MatchSummary:
    match_id: str
    game_creation: int  # Unix timestamp milliseconds
    game_duration: int  # Seconds
    queue_id: int
    queue_name: str
    champion_id: int
    champion_name: str
    win: bool
    kills: int
    deaths: int
    assists: int
    cs: int = 0  # lane minions + neutral monsters
    total_damage: int = 0  # to champions
    gold_earned: int = 0

    @property
    def played_at(self) -> datetime:
        return datetime.fromtimestamp(self.game_creation / 1000, tz=timezone.utc)

    @property
    def kda(self) -> float:
        """Zero deaths counts as a perfect game: kills + assists."""
        if self.deaths == 0:
            return float(self.kills + self.assists)
        return (self.kills + self.assists) / self.deaths

    @property
    def cs_per_minute(self) -> float:
        if self.game_duration <= 0:
            return 0.0
        return self.cs / (self.game_duration / 60.0)

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'game_creation': self.game_creation,
            'played_at': self.played_at.isoformat(),
            'game_duration': self.game_duration,
            'queue_id': self.queue_id,
            'queue_name': self.queue_name,
            'champion_id': self.champion_id,
            'champion_name': self.champion_name,
            'win': self.win,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kda': round(self.kda, 2),
            'cs': self.cs,
            'cs_per_minute': round(self.cs_per_minute, 1),
            'total_damage': self.total_damage,
            'gold_earned': self.gold_earned,
        }
