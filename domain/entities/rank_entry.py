"""Competitive standing in one queue."""
from dataclasses import dataclass

from ..enums import QueueType

UNRANKED = "UNRANKED"


@dataclass(frozen=True)
class RankEntry:
    """One league entry. A missing tier is stored as ``UNRANKED`` with no division."""

    queue: QueueType
    tier: str = UNRANKED
    division: str = ""
    league_points: int = 0
    wins: int = 0
    losses: int = 0
    queue_type: str = ""  # raw upstream value, kept for queues folded into OTHER

    @property
    def is_ranked(self) -> bool:
        return self.tier != UNRANKED

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        if self.games == 0:
            return 0.0
        return (self.wins / self.games) * 100

    @property
    def display(self) -> str:
        """``GOLD II (45LP)`` or ``UNRANKED``."""
        if not self.is_ranked:
            return UNRANKED
        standing = f"{self.tier} {self.division}".strip()
        return f"{standing} ({self.league_points}LP)"

    def to_dict(self) -> dict:
        return {
            'queue_type': self.queue_type or self.queue.api_queue_name,
            'queue_name': self.queue.display_name,
            'tier': self.tier,
            'division': self.division,
            'league_points': self.league_points,
            'wins': self.wins,
            'losses': self.losses,
            'win_rate': round(self.win_rate, 2),
            'display': self.display,
        }
