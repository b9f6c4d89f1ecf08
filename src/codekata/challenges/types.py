"""Challenge type definitions."""

import textwrap
import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class DifficultyLevel(str, Enum):
    """Difficulty tiers, stored by value."""

    WHITE_BELT = "White Belt"
    BROWN_BELT = "Brown Belt"
    BLACK_BELT = "Black Belt"

    @property
    def glyph(self) -> str:
        """Return the display glyph for this tier."""
        return _GLYPHS[self]

    @property
    def label(self) -> str:
        """Return the human-readable tier name."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "DifficultyLevel":
        """Parse a tier from its value, its member name or a legacy label.

        Legacy labels ("Easy", "Medium", "Hard") come from the old sample
        data and map onto the belts in order.

        Raises:
            ValueError: If the text names no tier.
        """
        key = text.strip().lower()
        for level in cls:
            if key in (level.value.lower(), level.name.lower()):
                return level
        if key in _LEGACY_LABELS:
            return _LEGACY_LABELS[key]
        raise ValueError(f"Unknown difficulty: {text!r}")


_GLYPHS = {
    DifficultyLevel.WHITE_BELT: "🤍",
    DifficultyLevel.BROWN_BELT: "🤎",
    DifficultyLevel.BLACK_BELT: "🖤",
}

_LEGACY_LABELS = {
    "easy": DifficultyLevel.WHITE_BELT,
    "medium": DifficultyLevel.BROWN_BELT,
    "hard": DifficultyLevel.BLACK_BELT,
}


def _new_id() -> str:
    return str(uuid.uuid4())


class Challenge(BaseModel):
    """A practice problem."""

    id: str = Field(default_factory=_new_id, frozen=True)
    title: str
    problem_description: str
    difficulty: DifficultyLevel
    category: str = Field(default="General")
    time_limit: int = Field(default=300, description="Time limit in seconds")
    points: int = Field(default=100)
    is_completed: bool = Field(default=False)

    model_config = {"validate_assignment": True}

    @property
    def description(self) -> str:
        """Alias for the problem text."""
        return self.problem_description

    def mark_completed(self) -> bool:
        """Set the completion flag.

        Returns:
            True if the flag was previously unset.
        """
        was_completed = self.is_completed
        self.is_completed = True
        return not was_completed

    def excerpt(self, max_lines: int = 2, width: int = 60) -> str:
        """Return the description wrapped and cut to ``max_lines`` lines."""
        lines = textwrap.wrap(self.problem_description, width=width) or [""]
        if len(lines) <= max_lines:
            return "\n".join(lines)
        kept = lines[:max_lines]
        kept[-1] = textwrap.shorten(kept[-1] + " …", width=width, placeholder=" …")
        return "\n".join(kept)


class UserProgress(BaseModel):
    """Aggregate progress for the single local user."""

    total_score: int = Field(default=0)
    current_streak: int = Field(default=0)
    completed_challenges: int = Field(default=0)
    last_activity_date: datetime = Field(default_factory=datetime.now)
    credited_ids: set[str] = Field(
        default_factory=set, description="Challenges already counted in the totals"
    )


# Built-in samples, in display order
SAMPLE_CHALLENGES = (
    {
        "title": "Two Sum",
        "problem_description": "Find two numbers that add up to target",
        "difficulty": DifficultyLevel.WHITE_BELT,
    },
    {
        "title": "Valid Parentheses",
        "problem_description": "Check if parentheses are properly matched",
        "difficulty": DifficultyLevel.WHITE_BELT,
    },
    {
        "title": "Binary Tree Traversal",
        "problem_description": "Implement inorder tree traversal",
        "difficulty": DifficultyLevel.BROWN_BELT,
    },
    {
        "title": "Dynamic Programming",
        "problem_description": "Solve using dynamic programming",
        "difficulty": DifficultyLevel.BLACK_BELT,
    },
)


def sample_challenges() -> list[Challenge]:
    """Build fresh Challenge records from the built-in samples."""
    return [Challenge(**data) for data in SAMPLE_CHALLENGES]
