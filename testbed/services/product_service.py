"""Product service - business logic for the product catalogue."""

import logging
from typing import List

from testbed.errors import NotFoundError, ValidationError
from testbed.models.domain import Product
from testbed.models.dto import ProductCreateRequest, ProductDTO, ProductUpdateRequest
from testbed.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product business logic. Products cannot be deleted."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    def list_products(self) -> List[ProductDTO]:
        """List all products."""
        return [self._to_dto(p) for p in self.product_repo.list()]

    def get_product(self, product_id: int) -> ProductDTO:
        """Get product by ID."""
        product = self.product_repo.get(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return self._to_dto(product)

    def create_product(self, request: ProductCreateRequest) -> ProductDTO:
        """
        Create a new product.

        Business rules:
        - Name must be non-empty and price strictly positive
        - Stock defaults to zero and may not be negative
        """
        if not request.name or request.price <= 0:
            raise ValidationError("Name and valid price are required")
        if request.stock < 0:
            raise ValidationError("Stock cannot be negative")

        product = self.product_repo.create(
            lambda product_id: Product(
                id=product_id,
                name=request.name,
                price=request.price,
                stock=request.stock,
            )
        )
        logger.info("Created product %d", product.id)
        return self._to_dto(product)

    def update_product(self, product_id: int, request: ProductUpdateRequest) -> ProductDTO:
        """Merge the supplied fields into an existing product."""
        product = self.product_repo.update(
            product_id,
            name=request.name,
            price=request.price,
            stock=request.stock,
        )
        if product is None:
            raise NotFoundError("Product not found")
        logger.info("Updated product %d", product_id)
        return self._to_dto(product)

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
        )
