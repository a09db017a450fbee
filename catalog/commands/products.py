"""Commands that store, show and report catalog products."""

import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from .base import BaseCommand, command_error_handler
from ..cli.config import Config
from ..products import ProductRow, ProductType, get_instance, product_from_row
from ..writers import get_writer
from ..writers.base import format_price

class AddProductCommand(BaseCommand):
    """Store a new product."""

    def __init__(
        self,
        config: Config,
        product_type: str,
        title: str,
        main_name: str,
        price: str,
        first_name: str = '',
        num_pages: Optional[int] = None,
        play_length: Optional[int] = None,
        discount: int = 0
    ):
        super().__init__(config)
        self.row = ProductRow(
            type=product_type,
            firstname=first_name,
            mainname=main_name,
            title=title,
            price=price,
            numpages=num_pages,
            playlength=play_length,
            discount=discount
        )

    @command_error_handler
    def execute(self) -> int:
        product = product_from_row(self.row)
        product_id = self.repository.add(product)
        self.logger.info(f"Stored {product.product_type.value} product {product_id}")
        click.echo(product_id)
        return product_id

class ShowProductCommand(BaseCommand):
    """Print one product's summary line and effective price."""

    def __init__(self, config: Config, product_id: int):
        super().__init__(config)
        self.product_id = product_id

    @command_error_handler
    def execute(self) -> None:
        product = get_instance(self.product_id, self.repository)
        click.echo(product.get_summary_line())
        click.echo(f"Price: {format_price(product.get_price())}")

class ReportCommand(BaseCommand):
    """Render stored products in the configured output format."""

    def __init__(
        self,
        config: Config,
        product_ids: Sequence[int] = (),
        output_format: Optional[str] = None,
        output_file: Optional[Path] = None
    ):
        super().__init__(config)
        self.product_ids = list(product_ids)
        self.output_format = output_format or config.output_format
        self.output_file = output_file

    @command_error_handler
    def execute(self) -> str:
        writer = get_writer(self.output_format, **self.config.writer_options(self.output_format))
        repository = self.repository

        if self.product_ids:
            products = [get_instance(product_id, repository) for product_id in self.product_ids]
        else:
            products = [product_from_row(row) for row in repository.fetch_all()]

        for product in products:
            writer.add_product(product)
        self.logger.debug(f"Rendering {len(products)} products as {self.output_format}")

        if self.output_file:
            output = writer.write_file(self.output_file)
            self.logger.info(f"Report saved to {self.output_file}")
            return output
        return writer.write_to(sys.stdout)

PRODUCT_TYPES = [t.value for t in ProductType]

__all__ = ['AddProductCommand', 'ShowProductCommand', 'ReportCommand', 'PRODUCT_TYPES']
