"""CSV report writer."""

import csv
import io

from .base import ProductWriter, format_price

FIELDNAMES = ['id', 'type', 'title', 'producer', 'price', 'summary']


class CsvProductWriter(ProductWriter):
    """One CSV row per product under a fixed header."""

    def write(self) -> str:
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=FIELDNAMES, lineterminator='\n')
        writer.writeheader()
        for product in self.products:
            writer.writerow({
                'id': '' if product.id is None else product.id,
                'type': product.product_type.value,
                'title': product.get_title(),
                'producer': product.get_producer(),
                'price': format_price(product.get_price()),
                'summary': product.get_summary_line()
            })
        return buffer.getvalue()
