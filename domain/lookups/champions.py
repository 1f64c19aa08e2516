"""Champion id -> display name (partial; extend with a Data Dragon file)."""
from .name_lookup import NameLookup

_CHAMPIONS = {
    1: "Annie",
    2: "Olaf",
    3: "Galio",
    4: "Twisted Fate",
    5: "Xin Zhao",
    10: "Kayle",
    11: "Master Yi",
    12: "Alistar",
    13: "Ryze",
    14: "Sion",
    17: "Teemo",
    18: "Tristana",
    19: "Warwick",
    20: "Nunu & Willump",
    21: "Miss Fortune",
    22: "Ashe",
    23: "Tryndamere",
    24: "Jax",
    25: "Morgana",
    26: "Zilean",
    51: "Caitlyn",
    84: "Akali",
    103: "Ahri",
    157: "Yasuo",
    238: "Zed",
    268: "Azir",
}

CHAMPIONS = NameLookup(_CHAMPIONS, fallback=lambda champion_id: f"Champion {champion_id}")
