"""Domain interfaces."""
from .riot_client import IRiotAPIClient
from .repository import IAccountRepository, ISummonerRepository, IMatchRepository
from .cache import IResponseCache

__all__ = [
    'IRiotAPIClient',
    'IAccountRepository',
    'ISummonerRepository',
    'IMatchRepository',
    'IResponseCache',
]
