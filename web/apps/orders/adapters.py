"""In-process adapter for the orders store.

``InMemoryOrderRepository`` implements ``OrderRepositoryPort`` without any
database. It is intended for unit tests and local development with the
``memory`` store backend.
"""

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional

from .domain import Order, OrderRepositoryPort


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


class InMemoryOrderRepository(OrderRepositoryPort):
    """Dictionary-backed order store.

    Args:
        clock: Returns the timestamp assigned to newly saved orders. Tests
            pass a fixed clock to control ``created_at``.
    """

    def __init__(self, clock: Callable[[], datetime] = _now):
        self._store: Dict[uuid.UUID, Order] = {}
        self._clock = clock

    def get(self, order_id: uuid.UUID) -> Optional[Order]:
        o = self._store.get(order_id)
        return replace(o, items=list(o.items)) if o else None

    def save(self, order: Order) -> Order:
        stored = replace(order, items=list(order.items), created_at=self._clock())
        self._store[stored.id] = stored
        return replace(stored, items=list(stored.items))

    def find_all_between(self, start: datetime, end: datetime) -> List[Order]:
        hits = [o for o in self._store.values() if start <= o.created_at <= end]
        hits.sort(key=lambda o: (o.created_at, str(o.id)))
        return [replace(o, items=list(o.items)) for o in hits]
