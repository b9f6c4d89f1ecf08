"""Challenge lifecycle: browsing and submitting."""

import asyncio
import logging
from enum import Enum
from typing import Optional

from ..errors import EmptySolutionError, StorageError
from ..storage.base import ChallengeStore
from ..storage.progress import ProgressTracker
from .types import Challenge

logger = logging.getLogger(__name__)


class SubmitResult:
    """Result of a submission."""

    def __init__(
        self,
        challenge: Challenge,
        saved: bool,
        first_completion: bool = False,
        error: Optional[str] = None,
    ):
        self.challenge = challenge
        self.saved = saved
        self.first_completion = first_completion
        self.error = error

    @property
    def ok(self) -> bool:
        return self.saved and self.error is None


class ChallengeEngine:
    """Entry point for everything the screens do with challenges."""

    def __init__(
        self,
        store: ChallengeStore,
        require_solution: bool = False,
    ):
        """Initialize the challenge engine.

        Args:
            store: Backing challenge store
            require_solution: Reject blank solutions on submit
        """
        self.store = store
        self.progress = ProgressTracker(store)
        self.require_solution = require_solution
        self._locks: dict[str, asyncio.Lock] = {}

    async def list_challenges(self) -> list[Challenge]:
        """Get every challenge in store order."""
        return await self.store.list_challenges()

    async def get_challenge(self, challenge_id: str) -> Challenge:
        """Get a specific challenge by ID."""
        return await self.store.get_challenge(challenge_id)

    async def submit(self, challenge_id: str, solution: str) -> SubmitResult:
        """Submit a solution and mark the challenge completed.

        The solution text is not judged. Progress is credited once per
        challenge, on the first submit whose progress update is saved; later
        submits keep the challenge completed and credit nothing.

        Args:
            challenge_id: ID of the challenge
            solution: The user's free-text solution

        Returns:
            SubmitResult describing whether the completion was persisted

        Raises:
            ChallengeNotFoundError: If the challenge doesn't exist
            EmptySolutionError: If blank solutions are rejected and this one is blank
        """
        if self.require_solution and not solution.strip():
            raise EmptySolutionError("Write a solution before submitting.")

        lock = self._locks.setdefault(challenge_id, asyncio.Lock())
        async with lock:
            challenge = await self.store.get_challenge(challenge_id)
            challenge.mark_completed()

            result = await self.store.save_challenge(challenge)
            if not result.ok:
                logger.warning("Submit for %s not saved: %s", challenge_id, result.error)
                return SubmitResult(challenge, saved=False, error=result.error)

            try:
                credited = await self.progress.record_completion(challenge)
            except StorageError as e:
                logger.warning("Progress for %s not updated: %s", challenge_id, e)
                return SubmitResult(challenge, saved=True, error=str(e))
            first_completion = credited is not None

            logger.info("Submitted %s (first completion: %s)", challenge_id, first_completion)
            return SubmitResult(challenge, saved=True, first_completion=first_completion)


class SessionState(str, Enum):
    """Detail screen states."""

    EDITING = "editing"
    SUBMITTED = "submitted"


class SubmissionSession:
    """The solution buffer for one visit to a challenge's detail screen."""

    def __init__(self, engine: ChallengeEngine, challenge: Challenge):
        self.engine = engine
        self.challenge = challenge
        self.state = SessionState.EDITING
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        # Buffer is frozen once submitted
        if self.state is SessionState.EDITING:
            self._text = value

    async def submit(self) -> SubmitResult:
        """Submit the buffer.

        The session only leaves EDITING once the completion is saved, so a
        failed save can be retried with edited text. Submitting again after
        that is allowed; the flag stays set.
        """
        result = await self.engine.submit(self.challenge.id, self._text)
        self.challenge = result.challenge
        if result.saved:
            self.state = SessionState.SUBMITTED
        return result
