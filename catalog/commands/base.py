"""
Base command infrastructure shared by catalog CLI commands.
"""

import functools
import click
import logging
import time
from abc import ABC, abstractmethod

from ..cli.config import Config

from ..db import ProductRepository, SessionManager
from ..processors.error_tracker import ErrorTracker

class BaseCommand(ABC):
    """Base class for all CLI commands."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.error_tracker = ErrorTracker()
        self._session_manager = None

        ctx = click.get_current_context(silent=True)
        self.debug = bool(ctx and ctx.obj and ctx.obj.get('debug'))

    @property
    def session_manager(self) -> SessionManager:
        """Session manager for the configured database, created on first use."""
        if self._session_manager is None:
            if self.debug:
                self.logger.debug(f"Creating engine for {self.config.database_url}")
            self._session_manager = SessionManager(self.config.database_url)
        return self._session_manager

    @property
    def repository(self) -> ProductRepository:
        return ProductRepository(self.session_manager)

    @abstractmethod
    def execute(self) -> None:
        """Execute the command. Must be implemented by subclasses."""
        pass

def command_error_handler(f):
    """Record a failing command in its error tracker and re-raise."""
    @functools.wraps(f)
    def wrapper(self, *args, **kwargs):
        start = time.time()
        try:
            result = f(self, *args, **kwargs)
        except Exception as e:
            self.error_tracker.add_error(
                'COMMAND_EXECUTION_ERROR',
                str(e),
                {'command': self.__class__.__name__}
            )
            self.error_tracker.log_summary(self.logger)
            if self.debug:
                self.logger.debug(f"Command failed: {e}", exc_info=True)
            raise
        if self.debug:
            self.logger.debug(f"Command completed in {time.time() - start:.3f}s")
        return result
    return wrapper
