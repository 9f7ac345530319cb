"""Product entity, its validation rules and the ports it is stored through."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class ProductStatus(str, Enum):
    """The states a product can be in."""

    DISABLED = "DISABLED"
    ENABLED = "ENABLED"


class ProductError(ValueError):
    """Raised when a product breaks one of its rules."""


@runtime_checkable
class ProductLike(Protocol):
    """What the service and adapters need from a product."""

    id: str
    name: str
    price: float
    status: str

    def is_valid(self) -> bool: ...

    def enable(self) -> None: ...

    def disable(self) -> None: ...


@runtime_checkable
class ProductPersistence(Protocol):
    """Storage port: reads and writes products."""

    def get(self, product_id: str) -> ProductLike: ...

    def save(self, product: ProductLike) -> ProductLike: ...


_UUID4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)
_STATUSES = frozenset(status.value for status in ProductStatus)


@dataclass
class Product:
    """A product with an identifier, a name, a price and a status."""

    id: str
    name: str
    price: float = 0.0
    status: str = ProductStatus.DISABLED.value

    def is_valid(self) -> bool:
        """Check the product's rules; an empty status becomes DISABLED.

        Returns True or raises ProductError.
        """
        if not self.status:
            self.status = ProductStatus.DISABLED.value

        if self.status not in _STATUSES:
            raise ProductError("o status deve ser ativo o desativo")

        if self.price < 0:
            raise ProductError("O preço deve ser maior que 0")

        problems = []
        if not self.id:
            problems.append("ID: non zero value required")
        elif not _UUID4.match(self.id):
            problems.append(f"ID: {self.id} does not validate as uuidv4")
        if not self.name:
            problems.append("Name: non zero value required")
        if problems:
            raise ProductError(";".join(problems))

        return True

    def enable(self) -> None:
        """Mark the product enabled; only allowed with a positive price."""
        if self.price > 0:
            self.status = ProductStatus.ENABLED.value
            return
        raise ProductError("o preço deve ser maior que 0 para habilitar o produto")

    def disable(self) -> None:
        """Mark the product disabled; only allowed with a zero price."""
        if self.price == 0:
            self.status = ProductStatus.DISABLED.value
            return
        raise ProductError("o preço deve ser 0 para desabilitar o produto")


def new_product(name: str, price: float) -> Product:
    """Create a disabled product with a fresh random identifier."""
    return Product(
        id=str(uuid.uuid4()),
        name=name,
        price=price,
        status=ProductStatus.DISABLED.value,
    )