"""Error collection for imports and commands."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import logging

class ErrorTracker:
    """Count errors per category and keep a few samples of each."""

    def __init__(self, max_samples: int = 3):
        """Initialize error tracker.

        Args:
            max_samples: Samples kept per error category
        """
        self.max_samples = max_samples
        self.error_counts: Dict[str, int] = defaultdict(int)
        self.error_samples: Dict[str, List[Dict[str, Any]]] = defaultdict(list)

    def add_error(self, error_type: str, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Record one occurrence of an error.

        Args:
            error_type: Category such as ``validation`` or ``processing``
            message: Human readable description
            context: Extra data shown with the sample (row number, values)
        """
        self.error_counts[error_type] += 1
        samples = self.error_samples[error_type]
        if len(samples) < self.max_samples:
            samples.append({'message': message, 'context': context or {}})

    @property
    def total(self) -> int:
        return sum(self.error_counts.values())

    def get_summary(self) -> Dict[str, Any]:
        return {
            'counts': dict(self.error_counts),
            'samples': {key: list(value) for key, value in self.error_samples.items()}
        }

    def log_summary(self, logger: logging.Logger) -> None:
        """Log counts and samples per category; silent when nothing was recorded."""
        if not self.error_counts:
            return

        logger.warning("Error summary:")
        for error_type, count in self.error_counts.items():
            logger.warning(f"  {error_type}: {count} occurrence(s)")
            for sample in self.error_samples[error_type]:
                details = ', '.join(f"{key}={value}" for key, value in sample['context'].items())
                logger.warning(f"    - {sample['message']}" + (f" ({details})" if details else ''))
