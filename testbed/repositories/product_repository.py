"""Product repository - in-memory implementation."""

from typing import Optional

from testbed.models.domain import Product
from testbed.repositories.base import InMemoryRepository


class ProductRepository(InMemoryRepository[Product]):
    """
    Repository for product data.

    Current implementation: In-memory (dict)
    No delete route is exposed for products; delete() is only inherited.
    """

    def update(
        self,
        product_id: int,
        name: Optional[str] = None,
        price: Optional[float] = None,
        stock: Optional[int] = None,
    ) -> Optional[Product]:
        """Merge supplied fields into the stored product.

        name is applied when non-empty, price when > 0, stock when >= 0.
        Returns the merged product, or None if the ID is unknown.
        """
        def apply(product: Product) -> None:
            if name:
                product.name = name
            if price is not None and price > 0:
                product.price = price
            if stock is not None and stock >= 0:
                product.stock = stock

        return self._merge(product_id, apply)
