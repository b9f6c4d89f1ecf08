"""Process-local store."""

from datetime import date
from typing import Iterable, Optional

from ..challenges.types import Challenge, UserProgress
from ..errors import ChallengeNotFoundError, DuplicateChallengeError
from .base import ChallengeStore, SaveResult


class InMemoryStore(ChallengeStore):
    """Keeps records in memory for the lifetime of the process.

    Records are copied in and out, so callers only see what was saved.
    """

    def __init__(self, challenges: Optional[Iterable[Challenge]] = None):
        self._challenges: dict[str, Challenge] = {}
        self._progress: Optional[UserProgress] = None
        self._activity: set[date] = set()
        if challenges is not None:
            for challenge in challenges:
                if challenge.id in self._challenges:
                    raise DuplicateChallengeError(challenge.id)
                self._challenges[challenge.id] = challenge.model_copy(deep=True)

    async def list_challenges(self) -> list[Challenge]:
        return [c.model_copy(deep=True) for c in self._challenges.values()]

    async def get_challenge(self, challenge_id: str) -> Challenge:
        try:
            return self._challenges[challenge_id].model_copy(deep=True)
        except KeyError:
            raise ChallengeNotFoundError(challenge_id) from None

    async def add_challenges(self, challenges: Iterable[Challenge]) -> None:
        pending = list(challenges)
        seen = set(self._challenges)
        for challenge in pending:
            if challenge.id in seen:
                raise DuplicateChallengeError(challenge.id)
            seen.add(challenge.id)
        for challenge in pending:
            self._challenges[challenge.id] = challenge.model_copy(deep=True)

    async def count_challenges(self) -> int:
        return len(self._challenges)

    async def save_challenge(self, challenge: Challenge) -> SaveResult:
        if challenge.id not in self._challenges:
            return SaveResult.failure(f"Challenge not found: {challenge.id}")
        self._challenges[challenge.id] = challenge.model_copy(deep=True)
        return SaveResult.success()

    async def get_progress(self) -> UserProgress:
        if self._progress is None:
            self._progress = UserProgress()
        return self._progress.model_copy(deep=True)

    async def save_progress(self, progress: UserProgress) -> SaveResult:
        self._progress = progress.model_copy(deep=True)
        return SaveResult.success()

    async def record_activity(self, day: date) -> None:
        self._activity.add(day)

    async def activity_days(self, limit: int = 30) -> list[date]:
        return sorted(self._activity, reverse=True)[:limit]
