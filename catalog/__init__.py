"""Product catalog package."""

from .errors import CatalogError, InvalidVariantDataError, OutputSinkError, ProductNotFoundError
from .products import BookProduct, CDProduct, ShopProduct, get_instance
from .writers import get_writer

__all__ = [
    'CatalogError',
    'InvalidVariantDataError',
    'OutputSinkError',
    'ProductNotFoundError',
    'ShopProduct',
    'BookProduct',
    'CDProduct',
    'get_instance',
    'get_writer'
]
