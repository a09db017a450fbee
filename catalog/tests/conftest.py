"""Shared test fixtures and utilities."""

import csv
import logging
import pytest
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from ..db import ProductRepository, SessionManager
from ..db.models import Base
from ..products import BookProduct, CDProduct, ShopProduct

@pytest.fixture
def engine():
    """Create an in-memory database shared by every session."""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def session_manager(engine):
    return SessionManager(engine=engine)

@pytest.fixture
def repository(session_manager):
    return ProductRepository(session_manager)

@pytest.fixture
def heart_of_a_dog():
    return ShopProduct('Heart of a Dog', 'Mikhail', 'Bulgakov', 5.99)

@pytest.fixture
def catch_22():
    return BookProduct('Catch 22', 'Joseph', 'Heller', 11.99, 300)

@pytest.fixture
def exile():
    return CDProduct('Exile on Coldharbour Lane', 'The', 'Alabama 3', 10.99, 60)

@pytest.fixture
def restore_logging():
    """Put root logger handlers back after a test that reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

def create_products_csv(path: Path, rows):
    """Write product rows to a CSV file laid out like the products table."""
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=[
            'type',
            'firstname',
            'mainname',
            'title',
            'price',
            'numpages',
            'playlength',
            'discount'
        ])
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return path
