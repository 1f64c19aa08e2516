"""Read-only id -> display name tables with a deterministic fallback."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

logger = logging.getLogger(__name__)


class NameLookup:
    """Immutable mapping of numeric ids to display names.

    ``name_for`` never raises: ids missing from the table go through
    ``fallback`` so callers can render them without special casing.
    """

    def __init__(self, names: Mapping[int, str], fallback: Callable[[int], str]) -> None:
        self._names = MappingProxyType(dict(names))
        self._fallback = fallback

    def name_for(self, key: int | None) -> str:
        if key is None:
            return self._fallback(0)
        name = self._names.get(key)
        return name if name is not None else self._fallback(key)

    def __contains__(self, key: object) -> bool:
        return key in self._names

    def __len__(self) -> int:
        return len(self._names)

    def merged(self, extra: Mapping[int, str]) -> 'NameLookup':
        """Return a new table with ``extra`` layered over this one."""
        return NameLookup({**self._names, **extra}, self._fallback)

    def with_data_dragon(self, path: Path | str) -> 'NameLookup':
        """Layer a Data Dragon ``champion.json`` over this table.

        The file maps champion keys to objects whose ``key`` field holds the
        numeric id as a string and whose ``name`` is the localised name.
        """
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
        extra: dict[int, str] = {}
        for entry in (payload.get("data") or {}).values():
            try:
                extra[int(entry["key"])] = str(entry["name"])
            except (KeyError, TypeError, ValueError):
                logger.warning(f"Skipping malformed champion entry in {path}")
        logger.info(f"Loaded {len(extra)} champion names from {path}")
        return self.merged(extra)
