"""Ranked queue types as reported by the league endpoints."""
from enum import Enum


class QueueType(Enum):
    """Competitive queues tracked with an independent rank.

    Provides:
    - api_queue_name: string used by league endpoints
    - display_name: human-readable name
    """

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"  # Solo/Duo Queue
    RANKED_FLEX_SR = "RANKED_FLEX_SR"    # Flex 5v5 Queue
    OTHER = "OTHER"

    @property
    def api_queue_name(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        names = {
            "RANKED_SOLO_5x5": "Ranked Solo/Duo",
            "RANKED_FLEX_SR": "Ranked Flex",
            "OTHER": "Other",
        }
        return names[self.value]

    @classmethod
    def from_api(cls, value: str | None) -> 'QueueType':
        """Unknown queues (TFT, Arena, ...) collapse to OTHER."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER
