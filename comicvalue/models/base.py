"""
SQLAlchemy 2.0 async DeclarativeBase for the valuation engine.

All models inherit from this Base.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all valuation database models."""
    pass
