"""Exceptions raised by the catalog package."""

from typing import Any


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFoundError(CatalogError):
    """No stored product matches the requested identifier."""

    def __init__(self, product_id: Any):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class InvalidVariantDataError(CatalogError):
    """Product data is missing or malformed for its variant."""


class OutputSinkError(CatalogError):
    """The report destination could not accept the rendered output."""
