"""SQLite storage adapter for products."""

from __future__ import annotations

import sqlite3

from hexstore.product import Product, ProductLike

_SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id TEXT PRIMARY KEY,
    name TEXT,
    price FLOAT,
    status TEXT
)
"""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the products table if it does not exist yet."""
    with connection:
        connection.execute(_SCHEMA)


class ProductDb:
    """Reads and writes products in a SQLite database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def get(self, product_id: str) -> Product:
        """Load the product with ``product_id``; raises LookupError if absent."""
        row = self.connection.execute(
            "SELECT id, name, price, status FROM products WHERE id = ?",
            (product_id,),
        ).fetchone()
        if row is None:
            raise LookupError(f"product {product_id!r} not found")
        found_id, name, price, status = row
        return Product(
            id=found_id,
            name=name or "",
            price=float(price or 0.0),
            status=status or "",
        )

    def save(self, product: ProductLike) -> ProductLike:
        """Insert the product, or update it when its identifier is already stored."""
        exists = self.connection.execute(
            "SELECT 1 FROM products WHERE id = ?", (product.id,)
        ).fetchone()
        with self.connection:
            if exists:
                self.connection.execute(
                    "UPDATE products SET name = ?, price = ?, status = ? WHERE id = ?",
                    (product.name, product.price, product.status, product.id),
                )
            else:
                self.connection.execute(
                    "INSERT INTO products (id, name, price, status) VALUES (?, ?, ?, ?)",
                    (product.id, product.name, product.price, product.status),
                )
        return product