"""SQLAlchemy persistence infrastructure.

This module provides:
- Table definitions and the imperative mapping of domain entities
- The Database (engine and session factory)
- Repository implementations and the unit of work
"""

from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Database",
    "SqlAlchemyUnitOfWork",
]
