"""Repository layer for persisting products.

Maps between the ``ProductModel`` ORM rows and the ``Product`` domain
dataclass so the domain layer is not coupled to Django ORM details.
"""

import uuid
from typing import Iterable, List, Optional

from .domain import Product, ProductRepositoryPort
from .models import ProductModel


def to_domain(obj: ProductModel) -> Product:
    return Product(id=obj.id, name=obj.name, price=obj.price)


class ProductRepository(ProductRepositoryPort):
    """Django ORM implementation of ``ProductRepositoryPort``."""

    def get(self, product_id: uuid.UUID) -> Optional[Product]:
        obj = ProductModel.objects.filter(id=product_id).first()
        return to_domain(obj) if obj else None

    def find_all(self) -> List[Product]:
        return [to_domain(o) for o in ProductModel.objects.all()]

    def find_all_by_ids(self, product_ids: Iterable[uuid.UUID]) -> List[Product]:
        """Batch lookup in a single ``IN`` query."""
        return [to_domain(o) for o in ProductModel.objects.filter(id__in=set(product_ids))]

    def save(self, product: Product) -> Product:
        """Insert or update the row keyed by ``product.id``.

        Returns:
            Product: The row as stored, re-read so decimal quantization
            applied by the column is reflected in the result.
        """
        ProductModel.objects.update_or_create(
            id=product.id,
            defaults={"name": product.name, "price": product.price},
        )
        return to_domain(ProductModel.objects.get(id=product.id))
