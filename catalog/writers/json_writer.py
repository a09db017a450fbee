"""JSON report writer."""

import json

from .base import ProductWriter, format_price


class JsonProductWriter(ProductWriter):
    """Array of product objects; prices are decimal strings."""

    def __init__(self, indent: int = 2):
        super().__init__()
        self.indent = indent

    def write(self) -> str:
        items = [
            {
                'id': product.id,
                'type': product.product_type.value,
                'title': product.get_title(),
                'producer': product.get_producer(),
                'price': format_price(product.get_price()),
                'summary': product.get_summary_line()
            }
            for product in self.products
        ]
        return json.dumps(items, indent=self.indent, ensure_ascii=False) + '\n'
