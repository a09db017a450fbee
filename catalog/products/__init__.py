"""Catalog product variants and their factory."""

from .base import BaseProduct, Chargeable, ProductType
from .variants import BookProduct, CDProduct, ShopProduct
from .factory import ProductRow, find_instance, get_instance, product_from_row

__all__ = [
    'BaseProduct',
    'Chargeable',
    'ProductType',
    'ShopProduct',
    'BookProduct',
    'CDProduct',
    'ProductRow',
    'product_from_row',
    'find_instance',
    'get_instance'
]
