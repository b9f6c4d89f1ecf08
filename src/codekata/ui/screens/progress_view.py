"""Screen showing the user's progress."""

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Label, Static


class ProgressScreen(Screen):
    """Score, streak and completion counts."""

    CSS = """
    #progress-section {
        height: auto;
        margin: 1 0;
        padding: 1;
        background: $surface-darken-1;
        border: solid $primary;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the progress screen."""
        with Container(id="main-content"):
            yield Static("My Progress", classes="title")
            with Vertical(id="progress-section"):
                yield Label("", id="total-score")
                yield Label("", id="current-streak")
                yield Label("", id="completed")
                yield Label("", id="remaining")
            yield Static("Press Esc to go back", classes="hint")

    async def on_screen_resume(self) -> None:
        """Refresh the numbers each time the screen is shown."""
        summary = await self.app.engine.progress.get_summary()
        days = summary["current_streak"]
        self.query_one("#total-score", Label).update(f"Total score: {summary['total_score']}")
        self.query_one("#current-streak", Label).update(
            f"Current streak: {days} day{'s' if days != 1 else ''}"
        )
        self.query_one("#completed", Label).update(
            f"Completed: {summary['challenges_completed']} of {summary['total_challenges']}"
        )
        self.query_one("#remaining", Label).update(
            f"Remaining: {summary['remaining_challenges']}"
        )
