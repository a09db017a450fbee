"""
Logging configuration for the catalog CLI.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

class DebugFormatter(logging.Formatter):
    """Timestamp and logger name, coloured when stderr is a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        message = f"[{record.created:.3f}] {record.name}: {record.getMessage()}"
        if sys.stderr.isatty():
            return f"\033[0;36m{message}\033[0m"
        return message

def setup_logging(debug: bool = False, log_dir: Optional[Path] = None, level: str = 'INFO') -> None:
    """Configure the root logger.

    Args:
        debug: Log at DEBUG regardless of ``level``
        log_dir: Also write ``catalog.log`` into this directory
        level: Level name used when not in debug mode
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(DebugFormatter())
    root_logger.addHandler(console_handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / 'catalog.log', encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        root_logger.addHandler(file_handler)

    # SQL echo only on explicit request
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
