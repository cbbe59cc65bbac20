"""
Models package — export all SQLAlchemy models.
"""

from comicvalue.models.base import Base
from comicvalue.models.cache_entry import CacheEntry

__all__ = ["Base", "CacheEntry"]
