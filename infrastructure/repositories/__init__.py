"""Infrastructure repositories module."""
from .account_repository import AccountRepository
from .match_repository import MatchRepository
from .summoner_repository import SummonerRepository

__all__ = [
    'AccountRepository',
    'MatchRepository',
    'SummonerRepository',
]
