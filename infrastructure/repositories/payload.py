"""Field extraction helpers shared by the repositories."""
import logging
from typing import Any, Mapping

from domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def require(data: Any, key: str, resource: str) -> Any:
    """Return ``data[key]`` or raise UpstreamError naming the resource, not the payload."""
    if not isinstance(data, Mapping) or data.get(key) is None:
        logger.warning(f"Malformed {resource} payload: missing '{key}'")
        logger.debug(f"{resource} payload: {str(data)[:500]}")
        raise UpstreamError(f"Riot API returned an incomplete {resource} record", details={"field": key})
    return data[key]


def require_int(data: Any, key: str, resource: str) -> int:
    value = require(data, key, resource)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UpstreamError(f"Riot API returned an invalid {resource} record", details={"field": key}) from None


def optional_int(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
