"""Progress tracking utilities."""

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..challenges.types import Challenge, UserProgress
from ..errors import StorageError
from .base import ChallengeStore

logger = logging.getLogger(__name__)


def calculate_streak(days: list[date], today: Optional[date] = None) -> int:
    """Count consecutive activity days ending today or yesterday.

    Args:
        days: Distinct activity days, newest first
        today: Reference day, defaults to the current date
    """
    if not days:
        return 0

    today = today or datetime.now().date()

    # Streak is broken if nothing happened today or yesterday
    if days[0] < today - timedelta(days=1):
        return 0

    streak = 1
    for i in range(1, len(days)):
        if days[i] == days[i - 1] - timedelta(days=1):
            streak += 1
        else:
            break

    return streak


class ProgressTracker:
    """Track the user's score, streak and completion count."""

    def __init__(self, store: ChallengeStore):
        """Initialize the progress tracker.

        Args:
            store: Store holding the progress record
        """
        self.store = store

    async def record_completion(
        self,
        challenge: Challenge,
        when: Optional[datetime] = None,
    ) -> Optional[UserProgress]:
        """Credit a completion unless this challenge was already credited.

        The activity day is written only after the progress record saves,
        so a failed save leaves both untouched and the next submit retries.

        Args:
            challenge: The challenge that was just completed
            when: Completion time, defaults to now

        Returns:
            The updated progress record, or None if nothing was credited

        Raises:
            StorageError: If the progress record could not be saved
        """
        when = when or datetime.now()

        progress = await self.store.get_progress()
        if challenge.id in progress.credited_ids:
            return None

        days = await self.store.activity_days()
        if when.date() not in days:
            days = sorted([*days, when.date()], reverse=True)

        progress.credited_ids.add(challenge.id)
        progress.total_score += challenge.points
        progress.completed_challenges += 1
        progress.last_activity_date = when
        progress.current_streak = calculate_streak(days, when.date())

        result = await self.store.save_progress(progress)
        if not result.ok:
            raise StorageError(f"Could not save progress: {result.error}")
        await self.store.record_activity(when.date())

        logger.info(
            "Completed %r: score=%d streak=%d",
            challenge.title,
            progress.total_score,
            progress.current_streak,
        )
        return progress

    async def get_summary(self) -> dict:
        """Get a summary of user's progress.

        Returns:
            Dict with progress metrics
        """
        progress = await self.store.get_progress()
        challenges = await self.store.list_challenges()
        completed = sum(1 for c in challenges if c.is_completed)

        # A streak that lapsed since the last submit reads as zero
        streak = calculate_streak(await self.store.activity_days())

        return {
            "total_score": progress.total_score,
            "current_streak": streak,
            "challenges_completed": progress.completed_challenges,
            "total_challenges": len(challenges),
            "remaining_challenges": len(challenges) - completed,
            "last_activity": progress.last_activity_date,
        }
