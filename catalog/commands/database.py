"""
Database commands for the catalog CLI.
"""

import click
from sqlalchemy import text

from .base import BaseCommand, command_error_handler

class InitDatabaseCommand(BaseCommand):
    """Create the products table."""

    @command_error_handler
    def execute(self) -> None:
        self.repository.create_schema()
        click.secho("Database schema created.", fg='green')

class TestConnectionCommand(BaseCommand):
    """Command to test database connectivity."""

    @command_error_handler
    def execute(self) -> None:
        self.logger.info("Testing database connection...")
        with self.session_manager as session:
            session.execute(text("SELECT 1")).scalar()
        click.secho("Successfully connected to the database!", fg='green')

__all__ = ['InitDatabaseCommand', 'TestConnectionCommand']
