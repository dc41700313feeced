"""HTTP views for the products app.

Views are kept small: they validate requests (via Pydantic), delegate to the
``ProductService`` obtained from ``providers.get_product_service()`` and map
results and domain errors to HTTP responses.
"""

import logging

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.errors import field_error, field_errors
from apps.common.ids import parse_uuid

from . import providers
from .domain import ProductNotFound
from .schemas import CreateProductDTO, ProductOut, UpdateProductDTO

logger = logging.getLogger("products")


def _invalid_id():
    return Response(field_error("id", "Invalid UUID"), status=status.HTTP_400_BAD_REQUEST)


class ProductsCollectionView(APIView):
    """List all products (GET) or create a product (POST)."""

    def get(self, request):
        """Return every product, or 204 when the catalogue is empty."""
        products = providers.get_product_service().get_all()
        if not products:
            logger.info("empty products list")
            return Response(status=status.HTTP_204_NO_CONTENT)
        body = [ProductOut.from_domain(p).model_dump() for p in products]
        return Response(body, status=status.HTTP_200_OK)

    def post(self, request):
        """Create a product.

        Returns:
            Response: 201 with the stored product, or 400 with field errors.
        """
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except ValidationError as e:
            return Response(field_errors(e), status=status.HTTP_400_BAD_REQUEST)

        product = providers.get_product_service().create(dto.name, dto.price)
        return Response(ProductOut.from_domain(product).model_dump(), status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """Read (GET) or partially update (PUT) a single product."""

    def get(self, request, product_id: str):
        pid = parse_uuid(product_id)
        if pid is None:
            return _invalid_id()
        try:
            product = providers.get_product_service().get_by_id(pid)
        except ProductNotFound:
            return Response({"detail": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductOut.from_domain(product).model_dump(), status=status.HTTP_200_OK)

    def put(self, request, product_id: str):
        """Apply a partial update.

        Only fields present (and non-null) in the body are changed. An
        unknown product id answers 422 rather than 404: the request names an
        entity the update cannot be applied to.
        """
        pid = parse_uuid(product_id)
        if pid is None:
            return _invalid_id()
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except ValidationError as e:
            return Response(field_errors(e), status=status.HTTP_400_BAD_REQUEST)

        try:
            product = providers.get_product_service().update(pid, dto.to_patch())
        except ProductNotFound as e:
            return Response(
                {"detail": "PRODUCT_NOT_FOUND", "message": str(e)},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(ProductOut.from_domain(product).model_dump(), status=status.HTTP_200_OK)
