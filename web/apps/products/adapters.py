"""In-process adapter for the products store.

``InMemoryProductRepository`` implements ``ProductRepositoryPort`` with a
plain dictionary. It backs the ``memory`` store backend and the domain unit
tests, where no database is wanted.
"""

import uuid
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from .domain import Product, ProductRepositoryPort


class InMemoryProductRepository(ProductRepositoryPort):
    """Dictionary-backed product store keyed by product id.

    Stored values are copies, so callers mutating a returned ``Product`` do
    not change the store behind its back.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._store: Dict[uuid.UUID, Product] = {}
        for p in products or []:
            self._store[p.id] = replace(p)

    def get(self, product_id: uuid.UUID) -> Optional[Product]:
        p = self._store.get(product_id)
        return replace(p) if p else None

    def find_all(self) -> List[Product]:
        return [replace(p) for p in self._store.values()]

    def find_all_by_ids(self, product_ids: Iterable[uuid.UUID]) -> List[Product]:
        wanted = set(product_ids)
        return [replace(p) for pid, p in self._store.items() if pid in wanted]

    def save(self, product: Product) -> Product:
        self._store[product.id] = replace(product)
        return replace(product)
