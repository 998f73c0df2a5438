"""
Base declarative class for SQLAlchemy models.
"""
from sqlalchemy.orm import declarative_base

# Single Base instance for all models
Base = declarative_base()
