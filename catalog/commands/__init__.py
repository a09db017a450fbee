"""
Command implementations for the catalog CLI.
"""

from .base import BaseCommand, command_error_handler
from .database import InitDatabaseCommand, TestConnectionCommand
from .imports import ImportProductsCommand
from .products import AddProductCommand, PRODUCT_TYPES, ReportCommand, ShowProductCommand

__all__ = [
    'BaseCommand',
    'command_error_handler',
    'InitDatabaseCommand',
    'TestConnectionCommand',
    'ImportProductsCommand',
    'AddProductCommand',
    'ShowProductCommand',
    'ReportCommand',
    'PRODUCT_TYPES'
]
