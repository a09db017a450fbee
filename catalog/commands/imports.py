"""CSV product import command."""

from pathlib import Path
from typing import Optional

from .base import BaseCommand, command_error_handler
from ..cli.config import Config
from ..processors.product_import import ProductImportProcessor

class ImportProductsCommand(BaseCommand):
    """Import products from a CSV file."""

    def __init__(self, config: Config, input_file: Path, batch_size: Optional[int] = None):
        super().__init__(config)
        self.input_file = input_file
        self.batch_size = batch_size or config.batch_size

    @command_error_handler
    def execute(self) -> int:
        """Run the import.

        Returns:
            Exit code: 0 when every row was imported, 1 otherwise
        """
        self.repository.create_schema()
        processor = ProductImportProcessor(
            self.session_manager,
            batch_size=self.batch_size,
            error_limit=self.config.error_limit,
            debug=self.debug
        )

        self.logger.info(f"Importing products from {self.input_file}")
        results = processor.process_file(self.input_file)
        if 'error' in results:
            raise ValueError(results['error'])

        stats = results['summary']['stats']
        self.logger.info("Import complete:")
        self.logger.info(f"Total products: {stats['total_products']}")
        self.logger.info(f"Created: {stats['created']}")
        self.logger.info(f"Skipped: {stats['skipped']}")
        self.logger.info(f"Validation errors: {stats['validation_errors']}")

        if not results['success']:
            self.logger.error(f"Failed batches: {stats['failed_batches']}")
            self.logger.error(f"Total errors: {stats['total_errors']}")
            return 1
        return 0

__all__ = ['ImportProductsCommand']
