"""Plain text report writer."""

from .base import ProductWriter

DEFAULT_HEADER = 'PRODUCTS:'


class TextProductWriter(ProductWriter):
    """Header line followed by one summary line per product."""

    def __init__(self, header: str = DEFAULT_HEADER):
        super().__init__()
        self.header = header

    def write(self) -> str:
        lines = [self.header]
        lines.extend(product.get_summary_line() for product in self.products)
        return ''.join(f"{line}\n" for line in lines)
