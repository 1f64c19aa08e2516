"""Static lookup tables used to enrich raw numeric ids."""
from .name_lookup import NameLookup
from .champions import CHAMPIONS
from .queues import QUEUES

__all__ = [
    'NameLookup',
    'CHAMPIONS',
    'QUEUES',
]
