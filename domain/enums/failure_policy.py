"""How the aggregation engine reacts to a failed per-match fetch."""
from enum import Enum


class MatchFailurePolicy(Enum):
    FAIL_FAST = "fail_fast"  # first failure (in match order) fails the request
    PARTIAL = "partial"      # keep successes, report failures separately

    @classmethod
    def from_string(cls, value: str) -> 'MatchFailurePolicy':
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown match failure policy: {value!r}") from None
