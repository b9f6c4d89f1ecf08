"""Storage module for persistence."""

from .base import ChallengeStore, SaveResult
from .database import Database
from .memory import InMemoryStore
from .progress import ProgressTracker, calculate_streak
from .seed import seed_if_empty

__all__ = [
    "ChallengeStore",
    "Database",
    "InMemoryStore",
    "ProgressTracker",
    "SaveResult",
    "calculate_streak",
    "seed_if_empty",
]
