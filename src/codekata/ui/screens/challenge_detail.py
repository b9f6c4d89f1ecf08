"""Screen showing one challenge with a solution editor."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer
from textual.screen import Screen
from textual.widgets import Button, Label, Static, TextArea

from ...challenges.engine import ChallengeEngine, SessionState, SubmissionSession
from ...challenges.types import Challenge
from ...errors import CodeKataError

logger = logging.getLogger(__name__)


class ChallengeDetailScreen(Screen):
    """Problem text, a free-text solution box and a submit button."""

    CSS = """
    #detail-header {
        height: auto;
        margin-bottom: 1;
    }

    #difficulty-badge {
        background: $primary-darken-2;
        padding: 0 1;
    }

    #points {
        width: 1fr;
        text-align: right;
        text-style: bold;
    }

    #problem-description {
        margin: 1 0;
    }

    #solution {
        height: 12;
        min-height: 8;
        border: solid $primary;
    }

    #btn-submit {
        width: 100%;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "submit", "Submit", show=True),
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self, challenge: Challenge, engine: ChallengeEngine, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.challenge = challenge
        self.session = SubmissionSession(engine, challenge)

    def compose(self) -> ComposeResult:
        """Compose the detail screen."""
        with ScrollableContainer(id="main-content"):
            with Horizontal(id="detail-header"):
                yield Label(self.challenge.difficulty.label, id="difficulty-badge")
                yield Label(f"{self.challenge.points} pts", id="points")
            yield Static(self.challenge.title, id="challenge-title", classes="title", markup=False)
            yield Static(self.challenge.problem_description, id="problem-description", markup=False)
            yield Label("Your Solution:", classes="section-header")
            yield TextArea(id="solution")
            yield Button("Submit Solution", id="btn-submit", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#solution", TextArea).focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.session.text = event.text_area.text

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-submit":
            await self.action_submit()

    async def action_submit(self) -> None:
        """Submit the current solution."""
        self.session.text = self.query_one("#solution", TextArea).text
        try:
            result = await self.session.submit()
        except CodeKataError as e:
            self.app.notify(str(e), title="Not submitted", severity="warning")
            return

        self.challenge = result.challenge
        if not result.saved:
            self.app.notify(
                f"Your solution could not be saved: {result.error}",
                title="Save failed",
                severity="error",
            )
            return

        if result.error:
            logger.warning("Submitted with error: %s", result.error)
            self.app.notify(result.error, title="Progress not updated", severity="warning")

        if self.session.state is SessionState.SUBMITTED:
            self.query_one("#solution", TextArea).read_only = True
        self.app.notify(
            "Great job! Your solution has been submitted.",
            title="Solution Submitted!",
        )

    def action_go_back(self) -> None:
        """Return to the challenge list."""
        self.app.pop_screen()
