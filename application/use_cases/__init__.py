"""Application use cases."""
from .get_match_history import GetPlayerMatchHistoryUseCase
from .get_player_profile import GetPlayerProfileUseCase
from .get_match_detail import GetMatchDetailUseCase

__all__ = [
    "GetPlayerMatchHistoryUseCase",
    "GetPlayerProfileUseCase",
    "GetMatchDetailUseCase",
]
