"""Helpers shared by the use cases."""
from __future__ import annotations

from typing import Optional

from domain.enums import resolve_platform_route


def clamp_count(count: Optional[int], default: int, maximum: int) -> int:
    """Missing count -> ``default``; anything else is forced into ``1..maximum``."""
    if count is None:
        return default
    return max(1, min(int(count), maximum))


def cache_key(kind: str, game_name: str, tag_line: str, *parts: object) -> str:
    """Riot IDs are case-insensitive, so the key is built from lowered values."""
    fields = [kind, game_name.strip().lower(), tag_line.strip().lstrip('#').lower()]
    fields.extend('' if p is None else str(p).lower() for p in parts)
    return ':'.join(fields)


def normalise_platform(platform: Optional[str]) -> Optional[str]:
    if platform is None or not platform.strip():
        return None
    return resolve_platform_route(platform)
