"""Database access for the catalog."""

from .repository import ProductRepository, record_from_product, row_from_record
from .session import SessionManager

__all__ = ['ProductRepository', 'SessionManager', 'record_from_product', 'row_from_record']
