"""Challenge records and their lifecycle."""

from .types import (
    SAMPLE_CHALLENGES,
    Challenge,
    DifficultyLevel,
    UserProgress,
    sample_challenges,
)

__all__ = [
    "SAMPLE_CHALLENGES",
    "Challenge",
    "DifficultyLevel",
    "UserProgress",
    "sample_challenges",
]
