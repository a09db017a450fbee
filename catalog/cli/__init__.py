"""
CLI module for the catalog package.

The click group lives in ``catalog.cli.main``; it is not imported here so the
command classes can use the configuration without loading the CLI itself.
"""

from .config import Config
from .logging import setup_logging, get_logger

__all__ = ['Config', 'setup_logging', 'get_logger']
