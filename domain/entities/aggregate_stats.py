"""Roll-up of a set of match summaries."""
from dataclasses import dataclass

NO_CHAMPION = "None"


@dataclass(frozen=True)
class AggregateStats:
    """Derived statistics; ``wins + losses == total_games`` always holds."""

    total_games: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0  # percent
    average_kda: float = 0.0
    total_kills: int = 0
    total_deaths: int = 0
    total_assists: int = 0
    average_kills: float = 0.0
    average_deaths: float = 0.0
    average_assists: float = 0.0
    most_played_champion: str = NO_CHAMPION

    @classmethod
    def empty(cls) -> 'AggregateStats':
        return cls()

    @property
    def win_rate_string(self) -> str:
        return f"{self.win_rate:.1f}%"

    @property
    def kda_string(self) -> str:
        """Per-game averages as ``K/D/A``."""
        return f"{self.average_kills:.1f}/{self.average_deaths:.1f}/{self.average_assists:.1f}"

    def to_dict(self) -> dict:
        return {
            'total_games': self.total_games,
            'wins': self.wins,
            'losses': self.losses,
            'win_rate': round(self.win_rate, 2),
            'average_kda': round(self.average_kda, 2),
            'total_kills': self.total_kills,
            'total_deaths': self.total_deaths,
            'total_assists': self.total_assists,
            'average_kills': round(self.average_kills, 2),
            'average_deaths': round(self.average_deaths, 2),
            'average_assists': round(self.average_assists, 2),
            'most_played_champion': self.most_played_champion,
        }
