from textual.widgets import Static, TextArea

from codekata.challenges.types import sample_challenges
from codekata.settings import Settings
from codekata.storage import Database, InMemoryStore
from codekata.ui.app import CodeKataApp
from codekata.ui.screens import ChallengeDetailScreen, ChallengeListScreen, ProgressScreen
from codekata.ui.widgets.challenge_row import COMPLETED_MARK, ChallengeRow


def make_app(store=None, **settings):
    settings.setdefault("storage", "memory")
    return CodeKataApp(Settings(**settings), store=store)


def row_texts(row):
    widgets = row.query(".row-glyph, .row-title, .row-excerpt, .row-done")
    return [str(widget.render()) for widget in widgets]


async def test_list_renders_one_row_per_challenge():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, ChallengeListScreen)
        rows = list(app.screen.query(ChallengeRow))
        assert len(rows) == len(sample_challenges())
        assert [row.challenge.title for row in rows] == [c.title for c in sample_challenges()]
        assert row_texts(rows[0])[:3] == [
            "🤍",
            "Two Sum",
            "Find two numbers that add up to target",
        ]
        assert [row_texts(row)[0] for row in rows] == [
            c.difficulty.glyph for c in sample_challenges()
        ]


async def test_empty_store_renders_empty_list():
    app = make_app(seed_on_empty=False)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert list(app.screen.query(ChallengeRow)) == []


async def test_two_record_store_renders_two_rows_in_order():
    store = InMemoryStore(sample_challenges()[:2])
    app = make_app(store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        rows = list(app.screen.query(ChallengeRow))
        assert [row.challenge.title for row in rows] == ["Two Sum", "Valid Parentheses"]


async def test_select_submit_and_return():
    store = InMemoryStore(sample_challenges())
    app = make_app(store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        screen = app.screen
        assert isinstance(screen, ChallengeDetailScreen)
        assert str(screen.query_one("#challenge-title", Static).render()) == "Two Sum"
        assert (
            str(screen.query_one("#problem-description", Static).render())
            == "Find two numbers that add up to target"
        )

        screen.query_one("#solution", TextArea).text = "x=1"
        await pilot.press("ctrl+s")
        await pilot.pause()

        challenge = (await store.list_challenges())[0]
        assert challenge.is_completed is True
        assert screen.query_one("#solution", TextArea).read_only

        screen.action_go_back()
        await pilot.pause()
        assert isinstance(app.screen, ChallengeListScreen)
        first_row = app.screen.query(ChallengeRow).first()
        assert first_row.challenge.is_completed
        assert row_texts(first_row)[-1] == COMPLETED_MARK


async def test_submit_with_empty_buffer_completes():
    store = InMemoryStore(sample_challenges())
    app = make_app(store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("j", "enter")
        await pilot.pause()
        assert app.screen.challenge.title == "Valid Parentheses"
        await app.screen.action_submit()
        assert (await store.list_challenges())[1].is_completed is True


async def test_require_solution_blocks_blank_submit():
    store = InMemoryStore(sample_challenges())
    app = make_app(store=store, require_solution=True)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        await app.screen.action_submit()
        assert (await store.list_challenges())[0].is_completed is False
        assert not app.screen.query_one("#solution", TextArea).read_only


async def test_progress_screen_shows_score():
    store = InMemoryStore(sample_challenges())
    app = make_app(store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        challenge = (await store.list_challenges())[0]
        await app.engine.submit(challenge.id, "done")

        await pilot.press("p")
        await pilot.pause()
        assert isinstance(app.screen, ProgressScreen)
        score = str(app.screen.query_one("#total-score").render())
        assert score == "Total score: 100"

        await pilot.press("escape")
        await pilot.pause()
        assert isinstance(app.screen, ChallengeListScreen)


async def test_completion_persists_across_app_runs(tmp_path):
    path = tmp_path / "data.db"

    app = make_app(store=Database(path), storage="sqlite", db_path=path)
    async with app.run_test() as pilot:
        await pilot.pause()
        challenge = (await app.engine.list_challenges())[0]
        await app.engine.submit(challenge.id, "x=1")

    app = make_app(store=Database(path), storage="sqlite", db_path=path)
    async with app.run_test() as pilot:
        await pilot.pause()
        rows = list(app.screen.query(ChallengeRow))
        assert len(rows) == len(sample_challenges())
        assert rows[0].challenge.id == challenge.id
        assert rows[0].challenge.is_completed is True
