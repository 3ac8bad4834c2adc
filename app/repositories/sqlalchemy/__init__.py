"""SQLAlchemy implementations of repository interfaces."""

from .check_in import SqlAlchemyCheckInRepository
from .gym import SqlAlchemyGymRepository

__all__ = [
    "SqlAlchemyGymRepository",
    "SqlAlchemyCheckInRepository",
]
