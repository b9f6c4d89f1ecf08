"""UI Screens."""

from .challenge_detail import ChallengeDetailScreen
from .challenge_list import ChallengeListScreen
from .progress_view import ProgressScreen

__all__ = ["ChallengeDetailScreen", "ChallengeListScreen", "ProgressScreen"]
