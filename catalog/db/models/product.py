"""Product table definition."""

from sqlalchemy import Column, Float, Integer, String

from .base import Base

class ProductRecord(Base):
    """Stored product row; ``type`` selects the variant on load."""

    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String)
    firstname = Column(String)
    mainname = Column(String)
    title = Column(String)
    price = Column(Float)
    numpages = Column(Integer)
    playlength = Column(Integer)
    discount = Column(Integer)

    def __repr__(self):
        """Return string representation."""
        return f'<ProductRecord(id={self.id}, type="{self.type}", title="{self.title}")>'
