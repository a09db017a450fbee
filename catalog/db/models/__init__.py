"""SQLAlchemy models for database tables."""

from .base import Base
from .product import ProductRecord

__all__ = [
    'Base',
    'ProductRecord'
]
