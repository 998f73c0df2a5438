"""
SQLAlchemy models.
"""
from .base import Base
from .last_command import LastCommandModel

__all__ = ["Base", "LastCommandModel"]
