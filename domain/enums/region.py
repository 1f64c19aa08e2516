"""Routing values for the Riot API hosts."""
from enum import Enum


class RegionalRoute(Enum):
    """Regional routing hosts, used for account and match APIs.

    Provides:
    - host: base url (e.g., https://asia.api.riotgames.com)
    - platforms: platform codes served by this route
    """

    ASIA = "asia"
    AMERICAS = "americas"
    EUROPE = "europe"

    @property
    def host(self) -> str:
        return f"https://{self.value}.api.riotgames.com"

    @property
    def platforms(self) -> list[str]:
        return [code for code, route in _PLATFORM_REGIONS.items() if route is self]

    @classmethod
    def from_string(cls, value: str) -> 'RegionalRoute':
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown regional route: {value!r}") from None


# user-facing shorthand -> platform routing code (summoner/league/mastery APIs)
PLATFORM_ROUTES: dict[str, str] = {
    "kr": "kr",
    "na": "na1",
    "euw": "euw1",
    "eune": "eun1",
    "jp": "jp1",
}

_PLATFORM_REGIONS: dict[str, RegionalRoute] = {
    "kr": RegionalRoute.ASIA,
    "jp1": RegionalRoute.ASIA,
    "na1": RegionalRoute.AMERICAS,
    "euw1": RegionalRoute.EUROPE,
    "eun1": RegionalRoute.EUROPE,
}


def resolve_platform_route(platform: str) -> str:
    """Map a shorthand such as ``"EUW"`` to ``"euw1"``.

    Lookup is case-insensitive; values missing from the table pass through
    unchanged so already-resolved codes (``"oc1"``) and new shards keep working.
    """
    return PLATFORM_ROUTES.get(platform.strip().lower(), platform)


def platform_host(platform: str) -> str:
    return f"https://{resolve_platform_route(platform)}.api.riotgames.com"
