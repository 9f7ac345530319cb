"""Application service coordinating products and their storage."""

from __future__ import annotations

from hexstore.product import ProductLike, ProductPersistence, new_product


class ProductService:
    """Creates, fetches, enables and disables products through a storage port."""

    def __init__(self, persistence: ProductPersistence) -> None:
        self.persistence = persistence

    def get(self, product_id: str) -> ProductLike:
        """Fetch a product by identifier."""
        return self.persistence.get(product_id)

    def create(self, name: str, price: float) -> ProductLike:
        """Build a new product, validate it and store it."""
        product = new_product(name, price)
        product.is_valid()
        return self.persistence.save(product)

    def enable(self, product: ProductLike) -> ProductLike:
        """Enable a product and store the change."""
        product.enable()
        return self.persistence.save(product)

    def disable(self, product: ProductLike) -> ProductLike:
        """Disable a product and store the change."""
        product.disable()
        return self.persistence.save(product)