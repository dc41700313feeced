"""Domain models, ports and service for products.

Products are plain dataclasses; persistence is reached through the
``ProductRepositoryPort`` protocol so the service works the same against the
Django ORM repository and the in-memory adapter.
"""

import dataclasses
import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Protocol

from apps.common.ids import UuidGenerator

logger = logging.getLogger("products")


class _Missing:
    """Marker type for fields absent from a partial update."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


# ---- Errors ----
class ProductNotFound(LookupError):
    """Raised when no product exists for the requested identifier."""

    def __init__(self, product_id: uuid.UUID):
        self.product_id = product_id
        super().__init__(f"Product with id: {product_id} could not be found")


# ---- Entities / DTOs ----
@dataclass
class Product:
    """A catalogue product.

    Attributes:
        id: Identifier assigned by ``ProductService.create``.
        name: Display name, at most 50 characters.
        price: Current unit price.
    """

    id: uuid.UUID
    name: str
    price: Decimal


@dataclass(frozen=True)
class ProductPatch:
    """Partial update for a product.

    Each field is either a new value or ``MISSING``. Only present fields are
    written by ``apply_patch``.
    """

    name: "str | _Missing" = MISSING
    price: "Decimal | _Missing" = MISSING

    def present_fields(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not MISSING
        }


def apply_patch(product: Product, patch: ProductPatch) -> Product:
    """Return a copy of ``product`` with the patch's present fields applied."""
    return dataclasses.replace(product, **patch.present_fields())


# ---- Ports (DIP) ----
class ProductRepositoryPort(Protocol):
    """Storage operations the product and order services rely on."""

    def get(self, product_id: uuid.UUID) -> Optional[Product]:
        raise NotImplementedError()

    def find_all(self) -> List[Product]:
        raise NotImplementedError()

    def find_all_by_ids(self, product_ids: Iterable[uuid.UUID]) -> List[Product]:
        """Return the stored products whose id is in ``product_ids``.

        Unknown ids are skipped silently; the result order is store-defined.
        """
        raise NotImplementedError()

    def save(self, product: Product) -> Product:
        raise NotImplementedError()


# ---- Domain service ----
class ProductService:
    """CRUD operations over products."""

    def __init__(self, repository: ProductRepositoryPort, ids: UuidGenerator | None = None):
        self.repository = repository
        self.ids = ids or UuidGenerator()

    def create(self, name: str, price: Decimal) -> Product:
        """Persist a new product under a freshly generated identifier."""
        product = self.repository.save(Product(id=self.ids.generate(), name=name, price=price))
        logger.info("product created", extra={"product_id": str(product.id)})
        return product

    def get_by_id(self, product_id: uuid.UUID) -> Product:
        """Fetch a product.

        Raises:
            ProductNotFound: If the identifier is unknown.
        """
        product = self.repository.get(product_id)
        if product is None:
            logger.info("product not found", extra={"product_id": str(product_id)})
            raise ProductNotFound(product_id)
        return product

    def get_all(self) -> List[Product]:
        return self.repository.find_all()

    def update(self, product_id: uuid.UUID, patch: ProductPatch) -> Product:
        """Apply a partial update and return the merged, persisted product.

        Fields missing from ``patch`` keep their stored values, so an empty
        patch returns the current state unchanged.

        Raises:
            ProductNotFound: If the identifier is unknown.
        """
        current = self.get_by_id(product_id)
        changed = patch.present_fields()
        if not changed:
            return current
        updated = self.repository.save(apply_patch(current, patch))
        logger.info(
            "product updated",
            extra={"product_id": str(product_id), "fields": sorted(changed)},
        )
        return updated
