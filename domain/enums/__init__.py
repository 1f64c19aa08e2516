"""Domain enumerations."""
from .region import RegionalRoute, PLATFORM_ROUTES, resolve_platform_route, platform_host
from .queue_type import QueueType
from .failure_policy import MatchFailurePolicy

__all__ = [
    'RegionalRoute',
    'PLATFORM_ROUTES',
    'resolve_platform_route',
    'platform_host',
    'QueueType',
    'MatchFailurePolicy',
]
