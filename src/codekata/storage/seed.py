"""Populate an empty store with the built-in challenges."""

import logging

from ..challenges.types import sample_challenges
from .base import ChallengeStore

logger = logging.getLogger(__name__)


async def seed_if_empty(store: ChallengeStore) -> int:
    """Insert the sample challenges if the store has none.

    Returns:
        Number of challenges inserted
    """
    if await store.count_challenges() > 0:
        return 0

    challenges = sample_challenges()
    await store.add_challenges(challenges)
    logger.info("Seeded %d sample challenges", len(challenges))
    return len(challenges)
