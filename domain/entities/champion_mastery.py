"""Champion mastery entry."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ChampionMastery:
    champion_id: int
    champion_name: str
    level: int
    points: int
    last_play_time: int = 0
    points_since_last_level: int = 0
    points_until_next_level: int = 0

    def to_dict(self) -> dict:
        return {
            'champion_id': self.champion_id,
            'champion_name': self.champion_name,
            'level': self.level,
            'points': self.points,
            'last_play_time': self.last_play_time,
            'points_since_last_level': self.points_since_last_level,
            'points_until_next_level': self.points_until_next_level,
        }
