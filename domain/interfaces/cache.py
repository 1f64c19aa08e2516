"""Response cache interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IResponseCache(ABC):
    """Key/value store for assembled responses with a time-to-live.

    Values are JSON-compatible dicts; ``get`` returns None for a miss or an
    expired entry.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def set(self, key: str, value: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        """Release backing resources, if any."""
