"""Product import processor for catalog CSV files."""

from pathlib import Path
from typing import Any, Dict, List, Tuple
import pandas as pd
from sqlalchemy.orm import Session

from ..db.repository import record_from_product
from ..db.session import SessionManager
from ..errors import InvalidVariantDataError
from ..products import ProductRow, ProductType, product_from_row
from .base import BaseProcessor
from .error_tracker import ErrorTracker

REQUIRED_COLUMNS = ['title', 'mainname', 'price']
TEXT_COLUMNS = ['type', 'firstname', 'mainname', 'title']
NUMERIC_COLUMNS = ['price', 'numpages', 'playlength', 'discount']
KNOWN_TYPES = {t.value for t in ProductType}

class ProductImportProcessor(BaseProcessor):
    """Import products from a CSV laid out like the ``products`` table.

    Every row is built into its product variant before it is stored, so the
    import applies the same validation as loading from the database.
    """

    def __init__(
        self,
        session_manager: SessionManager,
        batch_size: int = 100,
        error_limit: int = 1000,
        debug: bool = False
    ):
        super().__init__(session_manager, batch_size, error_limit, debug)
        self.error_tracker = ErrorTracker()
        self._pending_created = 0

        self.stats.total_products = 0
        self.stats.created = 0
        self.stats.skipped = 0
        self.stats.validation_errors = 0

    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        critical_issues = []
        warnings = []

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            critical_issues.append(f"Missing required columns: {', '.join(missing_columns)}")
            return critical_issues, warnings

        empty_titles = df[df['title'].isna()]
        if not empty_titles.empty:
            warnings.append(
                f"Found {len(empty_titles)} rows without a title that will be skipped. "
                f"First few row numbers: {', '.join(map(str, empty_titles.index[:3]))}"
            )

        prices = pd.to_numeric(df['price'], errors='coerce')
        bad_prices = df[prices.isna() & df['price'].notna()]
        if not bad_prices.empty:
            warnings.append(
                f"Found {len(bad_prices)} rows with non-numeric prices. "
                f"First few: {', '.join(bad_prices['price'].astype(str).head(3).tolist())}"
            )

        if 'type' in df.columns:
            types = df['type'].dropna().astype(str)
            unknown = sorted(set(types) - KNOWN_TYPES)
            if unknown:
                warnings.append(f"Unknown product types will be imported as generic products: {', '.join(unknown)}")

        return critical_issues, warnings

    def _row_from_series(self, series: pd.Series) -> ProductRow:
        values: Dict[str, Any] = {}
        for column in TEXT_COLUMNS + NUMERIC_COLUMNS:
            value = series.get(column)
            if value is None or (not isinstance(value, str) and pd.isna(value)):
                values[column] = None
            elif column in TEXT_COLUMNS:
                values[column] = str(value).strip()
            else:
                values[column] = value
        return ProductRow(**values)

    def _process_batch(self, session: Session, batch_df: pd.DataFrame) -> None:
        self._pending_created = 0
        for idx, series in batch_df.iterrows():
            row = self._row_from_series(series)
            if not row.title:
                self.stats.skipped += 1
                continue

            self.stats.total_products += 1
            try:
                product = product_from_row(row)
            except (InvalidVariantDataError, ValueError) as e:
                self.error_tracker.add_error('validation', str(e), {'row': idx, 'title': row.title})
                self.stats.validation_errors += 1
                self.stats.total_errors += 1
                continue

            session.add(record_from_product(product))
            self._pending_created += 1
            if self.debug:
                self.logger.debug(f"Queued row {idx}: {product.get_summary_line()}")

    def _batch_committed(self) -> None:
        self.stats.created += self._pending_created
        self._pending_created = 0

    def process_file(self, file_path: Path) -> Dict[str, Any]:
        """Read a CSV file and import it.

        Returns:
            Dictionary with ``success`` and a ``summary`` of stats and errors
        """
        try:
            df = pd.read_csv(file_path)
        except Exception as e:
            error_msg = f"Error reading CSV file: {e}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'summary': {'stats': self.get_stats(), 'errors': {}}
            }

        if self.debug:
            self.logger.debug(f"Read {len(df)} rows from {file_path}")

        stats = self.process(df)
        self.error_tracker.log_summary(self.logger)
        return {
            'success': stats['failed_batches'] == 0 and stats['total_errors'] == 0,
            'summary': {
                'stats': stats,
                'errors': self.error_tracker.get_summary()
            }
        }
