"""Pydantic schemas for products.

Request DTOs validate incoming JSON bodies; ``ProductOut`` is the response
shape shared with the orders API, where it describes line items.
"""

import uuid
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .domain import MISSING, Product, ProductPatch

NAME_MAX_LENGTH = 50


class CreateProductDTO(BaseModel):
    """Schema for creating a product.

    Attributes:
        name: Required, at most 50 characters.
        price: Required, strictly positive, at most two decimal places.
    """

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2)


class UpdateProductDTO(BaseModel):
    """Schema for a partial product update.

    Both fields are optional; omitted or ``null`` fields leave the stored
    value untouched.
    """

    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    price: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)

    def to_patch(self) -> ProductPatch:
        present = self.model_dump(exclude_unset=True, exclude_none=True)
        return ProductPatch(
            name=present.get("name", MISSING),
            price=present.get("price", MISSING),
        )


class ProductOut(BaseModel):
    """Response shape for a product (or an order line item)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    price: Decimal

    @classmethod
    def from_domain(cls, product: Product) -> "ProductOut":
        return cls.model_validate(product)
