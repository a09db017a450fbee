"""Base processor for batched imports."""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple
import logging
import time
import pandas as pd
from sqlalchemy.orm import Session

from ..db.session import SessionManager

class ProcessingStats:
    """Counters for one processing run, readable as keys or attributes.

    Unknown counters start at zero on first access, so processors can add
    their own with ``self.stats.created += 1``.
    """

    def __init__(self):
        self._stats = {
            'total_processed': 0,
            'successful_batches': 0,
            'failed_batches': 0,
            'total_errors': 0,
            'processing_time': 0.0,
            'started_at': datetime.now(timezone.utc),
            'completed_at': None
        }

    def __getitem__(self, key: str) -> Any:
        return self._stats[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._stats[key] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith('__'):
            raise AttributeError(name)
        return self._stats.setdefault(name, 0)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == '_stats':
            super().__setattr__(name, value)
        else:
            self._stats[name] = value

    def to_dict(self) -> Dict[str, Any]:
        """Stats with datetimes as ISO strings and floats rounded."""
        result = {}
        for key, value in self._stats.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, float):
                result[key] = round(value, 3)
            else:
                result[key] = value
        return result

class BaseProcessor(ABC):
    """Validate a DataFrame, then process it in batches, one session per batch."""

    def __init__(
        self,
        session_manager: SessionManager,
        batch_size: int = 100,
        error_limit: int = 1000,
        debug: bool = False
    ):
        """Initialize processor.

        Args:
            session_manager: Database session manager
            batch_size: Number of rows per batch
            error_limit: Stop after this many errors
            debug: Enable debug logging
        """
        self.session_manager = session_manager
        self.batch_size = batch_size
        self.error_limit = error_limit
        self.debug = debug
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ProcessingStats()

    @abstractmethod
    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        """Check the data before processing.

        Returns:
            Tuple of (critical_issues, warnings)
        """
        pass

    @abstractmethod
    def _process_batch(self, session: Session, batch_df: pd.DataFrame) -> None:
        """Process one batch inside an open session."""
        pass

    def process(self, data: pd.DataFrame) -> Dict[str, Any]:
        """Validate and process all rows.

        Critical validation issues stop the run before any batch; a failing
        batch is rolled back, counted and skipped.

        Returns:
            Processing stats
        """
        critical_issues, warnings = self.validate_data(data)

        for warning in warnings:
            self.logger.warning(f"Validation warning: {warning}")

        if critical_issues:
            for issue in critical_issues:
                self.logger.error(f"Validation failed: {issue}")
            self.stats.total_errors += len(critical_issues)
            self.stats.completed_at = datetime.now(timezone.utc)
            return self.get_stats()

        total_rows = len(data)
        total_batches = (total_rows + self.batch_size - 1) // self.batch_size
        if self.debug:
            self.logger.debug(f"Processing {total_rows} rows in {total_batches} batches")

        for batch_num, start_idx in enumerate(range(0, total_rows, self.batch_size), 1):
            batch_start = time.time()
            batch_df = data.iloc[start_idx:start_idx + self.batch_size]

            try:
                with self.session_manager as session:
                    self._process_batch(session, batch_df)
            except Exception as e:
                self.logger.error(f"Batch {batch_num}/{total_batches} failed at row {start_idx}: {e}")
                self.stats.failed_batches += 1
                self.stats.total_errors += 1
            else:
                self.stats.successful_batches += 1
                self.stats.total_processed += len(batch_df)
                self._batch_committed()
                if self.debug:
                    self.logger.debug(f"Batch {batch_num}/{total_batches} done")
            finally:
                self.stats.processing_time += time.time() - batch_start

            if self.stats.total_errors >= self.error_limit:
                self.logger.error(f"Stopping: error limit ({self.error_limit}) reached")
                break

        self.stats.completed_at = datetime.now(timezone.utc)
        return self.get_stats()

    def _batch_committed(self) -> None:
        """Called after a batch's session has committed."""
        pass

    def get_stats(self) -> Dict[str, Any]:
        return self.stats.to_dict()
