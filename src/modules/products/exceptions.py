"""Product domain exceptions.

Raised by the Service Layer when a statement matched no row.
The API layer (Views) catches these and translates them into
404 responses carrying the exception message.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No product matched the operation's id and visibility predicate."""

    def __init__(self, message: str = "Product not found") -> None:
        super().__init__(message)
        self.message = message
