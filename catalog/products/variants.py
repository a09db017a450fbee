"""Concrete product variants."""

from dataclasses import dataclass
from decimal import Decimal

from .base import BaseProduct, ProductType, to_positive_int


@dataclass
class ShopProduct(BaseProduct):
    """Generic product with discount-aware pricing."""

    product_type = ProductType.SHOP

    def summary_suffix(self) -> str:
        return ''


@dataclass
class BookProduct(BaseProduct):
    """Book with a page count."""

    product_type = ProductType.BOOK

    num_pages: int

    def __post_init__(self):
        super().__post_init__()
        self.num_pages = to_positive_int(self.num_pages, 'num_pages')

    def get_num_pages(self) -> int:
        return self.num_pages

    def get_price(self) -> Decimal:
        """Books always sell at base price; a stored discount is ignored."""
        return self.price

    def summary_suffix(self) -> str:
        return f": {self.num_pages} pages"


@dataclass
class CDProduct(BaseProduct):
    """Recording with a play length."""

    product_type = ProductType.CD

    play_length: int

    def __post_init__(self):
        super().__post_init__()
        self.play_length = to_positive_int(self.play_length, 'play_length')

    def get_play_length(self) -> int:
        return self.play_length

    def summary_suffix(self) -> str:
        return f": playing time - {self.play_length}"
