"""Data-transfer object for products arriving from outside the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from hexstore.product import Product


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class ProductDTO:
    """Product fields as they appear in a JSON document."""

    id: str = ""
    name: str = ""
    price: float = 0.0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProductDTO":
        """Build from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("product data must be an object")
        price = data.get("price", 0.0)
        if price is None:
            price = 0.0
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError("field 'price' must be a number")
        return cls(
            id=_string_field(data, "id"),
            name=_string_field(data, "name"),
            price=float(price),
            status=_string_field(data, "status"),
        )

    def bind(self, product: Product) -> Product:
        """Copy these fields onto ``product`` and validate it.

        The identifier is only copied when set. Raises ProductError if the
        resulting product is invalid.
        """
        if self.id:
            product.id = self.id
        product.name = self.name
        product.price = self.price
        product.status = self.status
        product.is_valid()
        return product