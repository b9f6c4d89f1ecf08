"""Storage interface shared by the in-memory and SQLite stores."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..challenges.types import Challenge, UserProgress


@dataclass
class SaveResult:
    """Outcome of a persistence call."""

    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "SaveResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "SaveResult":
        return cls(ok=False, error=error)


class ChallengeStore(ABC):
    """Holds challenge records and the user's progress.

    Lookups and inserts raise on failure. Saves never raise for storage
    errors; they return a failed ``SaveResult`` so the caller decides how
    to surface it.
    """

    async def connect(self) -> None:
        """Open the store."""

    async def close(self) -> None:
        """Release the store."""

    @abstractmethod
    async def list_challenges(self) -> list[Challenge]:
        """Return every challenge in insertion order."""

    @abstractmethod
    async def get_challenge(self, challenge_id: str) -> Challenge:
        """Return one challenge.

        Raises:
            ChallengeNotFoundError: If no challenge has this id.
        """

    @abstractmethod
    async def add_challenges(self, challenges: Iterable[Challenge]) -> None:
        """Insert new challenges.

        Raises:
            DuplicateChallengeError: If any id is already stored. Nothing is
                inserted in that case.
        """

    @abstractmethod
    async def count_challenges(self) -> int:
        """Return the number of stored challenges."""

    @abstractmethod
    async def save_challenge(self, challenge: Challenge) -> SaveResult:
        """Persist changes to an existing challenge."""

    @abstractmethod
    async def get_progress(self) -> UserProgress:
        """Return the progress record, creating a default one if needed."""

    @abstractmethod
    async def save_progress(self, progress: UserProgress) -> SaveResult:
        """Persist the progress record."""

    @abstractmethod
    async def record_activity(self, day: date) -> None:
        """Note that the user submitted something on ``day``."""

    @abstractmethod
    async def activity_days(self, limit: int = 30) -> list[date]:
        """Return distinct activity days, newest first."""
