"""Product persistence on top of SQLAlchemy."""

import logging
from typing import List, Optional

from .models import Base, ProductRecord
from .session import SessionManager
from ..products import BaseProduct, BookProduct, CDProduct, ProductRow

logger = logging.getLogger(__name__)


def row_from_record(record: ProductRecord) -> ProductRow:
    """Copy a mapped record into a plain row detached from the session."""
    return ProductRow(
        type=record.type,
        firstname=record.firstname,
        mainname=record.mainname,
        title=record.title,
        price=record.price,
        numpages=record.numpages,
        playlength=record.playlength,
        discount=record.discount,
        id=record.id
    )


def record_from_product(product: BaseProduct) -> ProductRecord:
    """Build an unsaved record for a product; the id is left to the database."""
    return ProductRecord(
        type=product.product_type.value,
        firstname=product.producer_first_name,
        mainname=product.producer_main_name,
        title=product.title,
        price=float(product.price),
        numpages=product.num_pages if isinstance(product, BookProduct) else None,
        playlength=product.play_length if isinstance(product, CDProduct) else None,
        discount=product.discount
    )


class ProductRepository:
    """Reads and stores products in the ``products`` table."""

    def __init__(self, session_manager: SessionManager):
        self.session_manager = session_manager

    def create_schema(self) -> None:
        """Create the products table if it does not exist."""
        Base.metadata.create_all(self.session_manager.engine)
        logger.info("Database schema ready")

    def fetch_row(self, product_id: int) -> Optional[ProductRow]:
        """Return the stored row for an id, or None if there is none."""
        with self.session_manager as session:
            record = session.get(ProductRecord, product_id)
            if record is None:
                return None
            return row_from_record(record)

    def fetch_all(self) -> List[ProductRow]:
        """Return every stored row ordered by id."""
        with self.session_manager as session:
            records = session.query(ProductRecord).order_by(ProductRecord.id).all()
            return [row_from_record(record) for record in records]

    def add(self, product: BaseProduct) -> int:
        """Store a new product and assign it the generated id.

        Returns:
            The new product id
        """
        with self.session_manager as session:
            record = record_from_product(product)
            session.add(record)
            session.flush()
            product_id = record.id
        product.set_id(product_id)
        logger.debug(f"Stored {product.product_type.value} product {product_id}: {product.title}")
        return product_id
