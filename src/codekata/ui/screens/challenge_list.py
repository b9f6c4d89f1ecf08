"""Screen listing every challenge."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import ListView, Static

from ..widgets.challenge_row import ChallengeRow
from .challenge_detail import ChallengeDetailScreen


class ChallengeListScreen(Screen):
    """All challenges in store order; selecting one opens its detail screen."""

    CSS = """
    #challenge-list {
        height: 1fr;
        border: solid $primary;
    }
    """

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("o", "open", "Open", show=False),
        Binding("l", "open", "Open", show=False),
    ]

    def compose(self) -> ComposeResult:
        """Compose the list screen."""
        with Container(id="main-content"):
            yield Static("CodeKata", classes="title")
            yield Static("Pick a challenge and submit your solution", classes="subtitle")
            yield ListView(id="challenge-list")

    async def on_screen_resume(self) -> None:
        """Reload rows whenever the screen becomes current again."""
        await self.reload()

    async def reload(self) -> None:
        """Rebuild the rows from the store."""
        challenges = await self.app.engine.list_challenges()
        list_view = self.query_one("#challenge-list", ListView)
        index = list_view.index
        await list_view.clear()
        await list_view.extend(ChallengeRow(challenge) for challenge in challenges)
        if challenges:
            list_view.index = min(index or 0, len(challenges) - 1)
        list_view.focus()

    def action_cursor_down(self) -> None:
        """Move down (j key)."""
        self.query_one("#challenge-list", ListView).action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move up (k key)."""
        self.query_one("#challenge-list", ListView).action_cursor_up()

    def action_open(self) -> None:
        """Open the highlighted challenge."""
        self.query_one("#challenge-list", ListView).action_select_cursor()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Open the detail screen for the selected row."""
        if isinstance(event.item, ChallengeRow):
            self.app.push_screen(ChallengeDetailScreen(event.item.challenge, self.app.engine))
