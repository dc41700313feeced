"""Pydantic schemas for orders.

JSON field names on the wire are camelCase (``customerEmail``,
``productIds``, ``totalPrice``); the schemas use snake_case attributes with
camelCase aliases.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from apps.products.schemas import ProductOut

from .domain import Order

# Wire format of timestamps, for both query parameters and responses
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateOrderDTO(CamelModel):
    """Schema for creating an order.

    Attributes:
        customer_email: Customer contact, validated as an e-mail address.
        product_ids: Non-empty list of product UUIDs.
    """

    customer_email: EmailStr
    product_ids: List[uuid.UUID] = Field(min_length=1)


class OrderIntervalQuery(BaseModel):
    """Query parameters of the time-range listing.

    Both bounds are required, are read only under their camelCase names
    and must use ``TIMESTAMP_FORMAT``.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_timestamp(cls, v):
        """Parse a ``yyyy-MM-ddTHH:mm:ss`` string.

        Raises:
            ValueError: When the value does not match the pattern.
        """
        if isinstance(v, datetime):
            return v
        try:
            return datetime.strptime(str(v), TIMESTAMP_FORMAT)
        except ValueError:
            raise ValueError("Timestamp must match yyyy-MM-ddTHH:mm:ss")


class OrderOut(CamelModel):
    """Response shape for an order.

    ``products`` lists the line-item snapshots in line order.
    """

    id: uuid.UUID
    customer_email: str
    timestamp: datetime
    total_price: Decimal
    products: List[ProductOut]

    @field_serializer("timestamp")
    def serialize_timestamp(self, ts: datetime) -> str:
        return ts.strftime(TIMESTAMP_FORMAT)

    @classmethod
    def from_domain(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            customer_email=order.customer_email,
            timestamp=order.created_at,
            total_price=order.total_price,
            products=[
                ProductOut(id=i.product_id, name=i.product_name, price=i.price)
                for i in order.items
            ],
        )

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True)
