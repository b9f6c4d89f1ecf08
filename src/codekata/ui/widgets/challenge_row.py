"""List row for a single challenge."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, ListItem, Static

from ...challenges.types import Challenge

COMPLETED_MARK = "✔"


class ChallengeRow(ListItem):
    """Difficulty glyph, title, a two-line excerpt and a completion mark."""

    DEFAULT_CSS = """
    ChallengeRow {
        height: auto;
        padding: 0 1;
    }

    ChallengeRow Horizontal {
        height: auto;
    }

    ChallengeRow .row-glyph {
        width: 4;
        padding-top: 1;
    }

    ChallengeRow .row-body {
        width: 1fr;
        height: auto;
    }

    ChallengeRow .row-title {
        text-style: bold;
    }

    ChallengeRow .row-excerpt {
        color: $text-muted;
        max-height: 2;
    }

    ChallengeRow .row-done {
        width: 3;
        color: $success;
        padding-top: 1;
    }
    """

    def __init__(self, challenge: Challenge, **kwargs) -> None:
        super().__init__(**kwargs)
        self.challenge = challenge

    def compose(self) -> ComposeResult:
        """Compose the row."""
        with Horizontal():
            yield Label(self.challenge.difficulty.glyph, classes="row-glyph")
            with Vertical(classes="row-body"):
                yield Label(self.challenge.title, classes="row-title", markup=False)
                yield Static(
                    self.challenge.excerpt(max_lines=2), classes="row-excerpt", markup=False
                )
            yield Label(
                COMPLETED_MARK if self.challenge.is_completed else "",
                classes="row-done",
            )
