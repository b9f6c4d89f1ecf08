"""Main Textual application."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..challenges.engine import ChallengeEngine
from ..errors import StorageError
from ..settings import Settings
from ..storage import ChallengeStore, Database, InMemoryStore, seed_if_empty
from .screens.challenge_list import ChallengeListScreen
from .screens.progress_view import ProgressScreen

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> ChallengeStore:
    """Create the store selected by the settings."""
    if settings.storage == "memory":
        return InMemoryStore()
    return Database(settings.db_path)


class CodeKataApp(App):
    """Practise coding challenges."""

    TITLE = "CodeKata"
    SUB_TITLE = "Coding challenges in your terminal"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-content {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    .title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    .subtitle {
        color: $text-muted;
        margin-bottom: 1;
    }

    .section-header {
        text-style: bold;
        margin: 1 0;
    }

    .hint {
        color: $text-muted;
        text-style: italic;
    }

    ListView > ListItem.--highlight {
        background: $primary-darken-2;
    }
    """

    BINDINGS = [
        Binding("p", "progress", "p:Progress", show=True),
        Binding("q", "quit", "q:Quit", show=True),
        Binding("?", "help", "?:Help", show=True),
        Binding("escape", "go_back", "Esc:Back", show=False),
    ]

    SCREENS = {
        "challenges": ChallengeListScreen,
        "progress": ProgressScreen,
    }

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[ChallengeStore] = None,
    ):
        super().__init__()
        self.settings = settings or Settings()
        self.store = store or build_store(self.settings)
        self.engine = ChallengeEngine(
            self.store, require_solution=self.settings.require_solution
        )

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Header()
        yield Footer()

    async def on_mount(self) -> None:
        """Open the store, seed it if needed, then show the list."""
        try:
            await self.store.connect()
            if self.settings.seed_on_empty:
                await seed_if_empty(self.store)
        except StorageError as e:
            logger.error("Store unavailable: %s", e)
            self.exit(return_code=1, message=str(e))
            return
        self.push_screen("challenges")

    async def on_unmount(self) -> None:
        """Close the store on exit."""
        await self.store.close()

    def action_progress(self) -> None:
        """Show the progress screen."""
        if not isinstance(self.screen, ProgressScreen):
            self.push_screen("progress")

    def action_go_back(self) -> None:
        """Go back to the previous screen, never past the challenge list."""
        if isinstance(self.screen, ChallengeListScreen):
            return
        if len(self.screen_stack) > 2:
            self.pop_screen()

    def action_help(self) -> None:
        """Show help."""
        self.notify(
            "List: j/k=Down/Up, Enter/o=Open\n"
            "Detail: Ctrl+S=Submit, Esc=Back\n"
            "Other: p=Progress, q=Quit",
            title="Keybindings",
            timeout=10,
        )
