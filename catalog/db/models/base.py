"""Declarative base for catalog tables."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
