"""Rebuild product variants from stored rows."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..errors import ProductNotFoundError
from .base import BaseProduct, ProductType, to_int
from .variants import BookProduct, CDProduct, ShopProduct

logger = logging.getLogger(__name__)


@dataclass
class ProductRow:
    """One stored product row, as read from the ``products`` table."""

    type: Optional[str]
    firstname: Optional[str]
    mainname: Optional[str]
    title: Optional[str]
    price: Any
    numpages: Optional[int] = None
    playlength: Optional[int] = None
    discount: Optional[int] = None
    id: Optional[int] = None


def product_from_row(row: ProductRow) -> Union[ShopProduct, BookProduct, CDProduct]:
    """Instantiate the variant named by the row's discriminator.

    ``"book"`` and ``"cd"`` are matched exactly; any other type loads as a
    generic product.

    Raises:
        InvalidVariantDataError: If the row's data does not fit its variant
    """
    firstname = row.firstname if row.firstname is not None else ''

    product: BaseProduct
    if row.type == ProductType.BOOK.value:
        product = BookProduct(row.title, firstname, row.mainname, row.price, row.numpages)
    elif row.type == ProductType.CD.value:
        product = CDProduct(row.title, firstname, row.mainname, row.price, row.playlength)
    else:
        product = ShopProduct(row.title, firstname, row.mainname, row.price)

    if row.id is not None:
        product.set_id(int(row.id))
    product.set_discount(to_int(row.discount, 'discount') if row.discount is not None else 0)
    return product


def find_instance(product_id: int, repository) -> Optional[BaseProduct]:
    """Load a product, returning None when no row matches.

    Args:
        product_id: Stored product identifier
        repository: Any object providing ``fetch_row(product_id)``
    """
    row = repository.fetch_row(product_id)
    if row is None:
        logger.debug(f"No product row for id {product_id}")
        return None
    return product_from_row(row)


def get_instance(product_id: int, repository) -> BaseProduct:
    """Load a product by id.

    Raises:
        ProductNotFoundError: If the repository has no such row
        InvalidVariantDataError: If the stored row is malformed
    """
    product = find_instance(product_id, repository)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product
