"""Command-line adapter: runs one product action and describes the result."""

from __future__ import annotations

from hexstore.service import ProductService


def run(
    service: ProductService,
    action: str,
    product_id: str,
    product_name: str,
    product_price: float,
) -> str:
    """Perform ``action`` and return a human-readable message.

    "create", "enable" and "disable" (also "disabled") create a product first;
    any other action looks a product up by ``product_id``.
    """
    if action == "create":
        product = service.create(product_name, product_price)
        return (
            f"Product ID {product.id} with name {product.name} has been created "
            f"with price {product.price:f} ans status {product.status}"
        )
    if action == "enable":
        product = service.create(product_name, product_price)
        result = service.enable(product)
        return f"Product {result.name} has been enabled"
    if action in ("disable", "disabled"):
        product = service.create(product_name, product_price)
        result = service.disable(product)
        return f"Product {result.name} has been disabled"

    product = service.get(product_id)
    return (
        f"Product ID: {product.id}\n name {product.name}\n, "
        f"price {product.price:f}\n status {product.status}\n"
    )