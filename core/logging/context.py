from __future__ import annotations

import contextvars
from typing import Any, Dict

_request_ctx: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("request_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_request_ctx.get())


class request_context(object):
    """Scope fields such as ``riot_id`` or ``match_id`` to every record logged inside the block.

    Works across ``await`` points because each asyncio task copies the
    current context when it is created.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_request_ctx.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _request_ctx.set(current)
        return current

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _request_ctx.reset(self._token)
            self._token = None
        return False
