"""Application layer - Services and use cases."""
from .services import MatchHistoryService, ResponseAssembler, calculate_stats
from .use_cases import GetPlayerMatchHistoryUseCase, GetPlayerProfileUseCase, GetMatchDetailUseCase

__all__ = [
    'MatchHistoryService',
    'ResponseAssembler',
    'calculate_stats',
    'GetPlayerMatchHistoryUseCase',
    'GetPlayerProfileUseCase',
    'GetMatchDetailUseCase',
]
