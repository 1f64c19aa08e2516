"""Match queue id -> display label."""
from .name_lookup import NameLookup

_QUEUES = {
    420: "Ranked Solo/Duo",
    440: "Ranked Flex",
    450: "ARAM",
    400: "Normal Draft",
    830: "Co-op vs. AI",
}

QUEUES = NameLookup(_QUEUES, fallback=lambda _queue_id: "Other Queue")
