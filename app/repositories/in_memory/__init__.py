"""In-memory implementations of repository interfaces."""

from .check_in import InMemoryCheckInRepository
from .gym import InMemoryGymRepository

__all__ = [
    "InMemoryGymRepository",
    "InMemoryCheckInRepository",
]
