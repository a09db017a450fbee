"""Base report writer."""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import List, Optional, TextIO
import logging
import sys

from ..errors import OutputSinkError
from ..products import BaseProduct


def format_price(price: Decimal) -> str:
    """Round a price to cents for display."""
    return str(price.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class ProductWriter(ABC):
    """Collects products and renders them as one report."""

    def __init__(self):
        self.products: List[BaseProduct] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def add_product(self, product: BaseProduct) -> None:
        """Append a product; insertion order is display order."""
        self.products.append(product)

    @abstractmethod
    def write(self) -> str:
        """Render every collected product.

        Returns:
            The complete report text
        """
        pass

    def write_to(self, stream: Optional[TextIO] = None) -> str:
        """Render the report, then emit it to a stream.

        Rendering finishes before anything is written, so a rendering error
        never leaves partial output behind.

        Args:
            stream: Destination, defaults to stdout

        Returns:
            The rendered report

        Raises:
            OutputSinkError: If the stream rejects the output
        """
        output = self.write()
        if stream is None:
            stream = sys.stdout
        try:
            stream.write(output)
            stream.flush()
        except (OSError, ValueError) as e:
            raise OutputSinkError(f"Failed to write report: {e}") from e
        self.logger.debug(f"Wrote {len(self.products)} products ({len(output)} chars)")
        return output

    def write_file(self, path: Path) -> str:
        """Render the report, then save it to a file.

        The file is only opened once rendering has succeeded, so a failed
        render leaves an existing report untouched.

        Raises:
            OutputSinkError: If the file cannot be opened or written
        """
        output = self.write()
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(output)
        except OSError as e:
            raise OutputSinkError(f"Failed to write report to {path}: {e}") from e
        self.logger.debug(f"Saved {len(self.products)} products to {path}")
        return output
