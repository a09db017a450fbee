"""Shared pricing and summary behaviour for catalog products."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
import re
from typing import Any, ClassVar, Optional

from ..errors import InvalidVariantDataError


class ProductType(str, Enum):
    """Discriminator stored alongside each product row."""

    SHOP = 'shop'
    BOOK = 'book'
    CD = 'cd'


class Chargeable(ABC):
    """Anything that can be charged for."""

    @abstractmethod
    def get_price(self) -> Decimal:
        """Return the effective price."""


def to_decimal(value: Any, name: str = 'price') -> Decimal:
    """Convert a numeric value to Decimal without float artifacts.

    Raises:
        InvalidVariantDataError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        raise InvalidVariantDataError(f"{name} must be numeric, got {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidVariantDataError(f"{name} must be numeric, got {value!r}")
    if not result.is_finite():
        raise InvalidVariantDataError(f"{name} must be finite, got {value!r}")
    return result


def to_int(value: Any, name: str) -> int:
    """Validate a whole number; integral floats such as 12.0 are accepted.

    Raises:
        InvalidVariantDataError: If the value is missing or fractional
    """
    if value is None or isinstance(value, bool):
        raise InvalidVariantDataError(f"{name} is required")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidVariantDataError(f"{name} must be an integer, got {value!r}")
    if not number.is_finite() or number != number.to_integral_value():
        raise InvalidVariantDataError(f"{name} must be an integer, got {value!r}")
    return int(number)


def to_positive_int(value: Any, name: str) -> int:
    """Validate a count such as a page count or play length.

    Raises:
        InvalidVariantDataError: If the value is missing, fractional or not positive
    """
    number = to_int(value, name)
    if number <= 0:
        raise InvalidVariantDataError(f"{name} must be positive, got {value!r}")
    return number


# Characters XML 1.0 cannot carry, even escaped
CONTROL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f]")


def check_text(value: str, name: str) -> str:
    """Reject control characters that would make reports unreadable.

    Raises:
        InvalidVariantDataError: If the text contains such a character
    """
    match = CONTROL_CHARS.search(str(value))
    if match:
        raise InvalidVariantDataError(
            f"{name} contains control character {match.group()!r} at position {match.start()}"
        )
    return value


@dataclass
class BaseProduct(Chargeable):
    """Fields and behaviour shared by every product variant.

    ``discount`` and ``id`` are keyword-only so variants can add positional
    fields after ``price``. Neither is range checked: a discount outside
    0..100 produces an out-of-range (possibly negative) price.
    """

    product_type: ClassVar[ProductType]

    title: str
    producer_first_name: str
    producer_main_name: str
    price: Decimal
    discount: int = field(default=0, kw_only=True)
    id: Optional[int] = field(default=None, kw_only=True)

    def __post_init__(self):
        if self.title is None:
            raise InvalidVariantDataError("title is required")
        if self.producer_main_name is None:
            raise InvalidVariantDataError("producer_main_name is required")
        if self.producer_first_name is None:
            self.producer_first_name = ''
        check_text(self.title, 'title')
        check_text(self.producer_first_name, 'producer_first_name')
        check_text(self.producer_main_name, 'producer_main_name')
        self.price = to_decimal(self.price)

    def set_discount(self, percent: int) -> None:
        self.discount = percent

    def set_id(self, product_id: int) -> None:
        self.id = product_id

    def get_title(self) -> str:
        return self.title

    def get_producer(self) -> str:
        return f"{self.producer_first_name} {self.producer_main_name}"

    def get_price(self) -> Decimal:
        """Base price less the whole-number percentage discount."""
        return self.price - (self.discount * self.price) / 100

    def get_summary_line(self) -> str:
        return (f"{self.title} ({self.producer_main_name}, "
                f"{self.producer_first_name}){self.summary_suffix()}")

    @abstractmethod
    def summary_suffix(self) -> str:
        """Variant specific text appended to the summary line."""
