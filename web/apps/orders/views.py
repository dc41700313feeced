"""HTTP views for the orders app.

This module contains DRF API views for the orders API. Views are kept
intentionally small: they validate requests (via Pydantic), delegate to the
domain service and map results and domain errors to HTTP responses.

The views obtain a configured ``OrderService`` from
``providers.get_order_service()``, which wires the Django ORM stores or the
in-memory ones depending on ``settings.STORE_BACKEND``. Tests can swap the
service by monkeypatching that provider.

Error mapping:
    - 400 with ``[{field, message}]`` for payload or query validation errors.
    - 404 with ``{"detail": "NOT_FOUND"}`` for an unknown order id.
    - 422 with ``{"detail": "PRODUCTS_NOT_FOUND", "missingIds": [...]}`` when
      the order references unknown products.
"""

import logging

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.errors import field_error, field_errors
from apps.common.ids import parse_uuid

from . import providers
from .domain import OrderNotFound, OrderProductNotFound
from .schemas import CreateOrderDTO, OrderIntervalQuery, OrderOut

logger = logging.getLogger("orders")


class OrdersCollectionView(APIView):
    """Create an order (POST) or list orders in a time interval (GET)."""

    def get(self, request):
        """List orders created within ``[startTime, endTime]``.

        Returns:
            Response: 200 with the orders, 204 when none match, or 400 when a
            bound is missing or malformed.
        """
        try:
            query = OrderIntervalQuery.model_validate(request.query_params.dict())
        except ValidationError as e:
            return Response(field_errors(e), status=status.HTTP_400_BAD_REQUEST)

        orders = providers.get_order_service().get_all_in_time_interval(query.start_time, query.end_time)
        if not orders:
            logger.info("empty orders list")
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response([OrderOut.from_domain(o).to_body() for o in orders], status=status.HTTP_200_OK)

    def post(self, request):
        """Create a new order.

        Args:
            request (Request): DRF request with a JSON body
                ``{customerEmail, productIds}``.

        Returns:
            Response: One of the following responses.
            - 201 with the created order.
            - 400 for DTO validation errors.
            - 422 with the missing product ids when any product is unknown.
        """
        # 1) Pydantic validation
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except ValidationError as e:
            return Response(field_errors(e), status=status.HTTP_400_BAD_REQUEST)

        # 2) Domain
        try:
            order = providers.get_order_service().create(dto.customer_email, dto.product_ids)
        except OrderProductNotFound as e:
            body = {
                "detail": "PRODUCTS_NOT_FOUND",
                "missingIds": [str(i) for i in e.missing_ids],
                "message": str(e),
            }
            return Response(body, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
        except ValueError as e:
            return Response(field_error("productIds", str(e)), status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderOut.from_domain(order).to_body(), status=status.HTTP_201_CREATED)


class RetrieveOrderView(APIView):
    def get(self, request, order_id: str):
        oid = parse_uuid(order_id)
        if oid is None:
            return Response(field_error("id", "Invalid UUID"), status=status.HTTP_400_BAD_REQUEST)
        try:
            order = providers.get_order_service().get_by_id(oid)
        except OrderNotFound:
            return Response({"detail": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderOut.from_domain(order).to_body(), status=status.HTTP_200_OK)
