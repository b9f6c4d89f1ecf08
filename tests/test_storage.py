from datetime import date, datetime

import pytest

from codekata.challenges.types import Challenge, DifficultyLevel, UserProgress, sample_challenges
from codekata.errors import ChallengeNotFoundError, DuplicateChallengeError, StorageError
from codekata.storage import Database, InMemoryStore, seed_if_empty


async def test_list_keeps_insertion_order(store):
    titles = [c.title for c in await store.list_challenges()]
    assert titles == [c.title for c in sample_challenges()]


async def test_ids_are_unique(store):
    ids = [c.id for c in await store.list_challenges()]
    assert len(ids) == len(set(ids))


async def test_get_challenge(store):
    first = (await store.list_challenges())[0]
    fetched = await store.get_challenge(first.id)
    assert fetched.title == "Two Sum"
    assert fetched.difficulty is DifficultyLevel.WHITE_BELT


async def test_get_missing_challenge(store):
    with pytest.raises(ChallengeNotFoundError):
        await store.get_challenge("nope")


async def test_duplicate_insert_adds_nothing(store):
    existing = (await store.list_challenges())[0]
    fresh = Challenge(
        title="Fresh", problem_description="New", difficulty=DifficultyLevel.BLACK_BELT
    )
    clash = Challenge(
        id=existing.id,
        title="Clash",
        problem_description="Same id",
        difficulty=DifficultyLevel.WHITE_BELT,
    )
    with pytest.raises(DuplicateChallengeError):
        await store.add_challenges([fresh, clash])
    assert await store.count_challenges() == len(sample_challenges())


async def test_save_challenge(store):
    challenge = (await store.list_challenges())[1]
    challenge.is_completed = True
    result = await store.save_challenge(challenge)
    assert result.ok
    assert (await store.get_challenge(challenge.id)).is_completed is True


async def test_save_unknown_challenge_fails(store):
    stray = Challenge(
        title="Stray", problem_description="Not stored", difficulty=DifficultyLevel.WHITE_BELT
    )
    result = await store.save_challenge(stray)
    assert not result.ok
    assert stray.id in result.error


async def test_progress_round_trip(store):
    progress = await store.get_progress()
    assert progress.total_score == 0

    progress.total_score = 200
    progress.completed_challenges = 2
    progress.current_streak = 1
    progress.credited_ids = {"a", "b"}
    assert (await store.save_progress(progress)).ok

    stored = await store.get_progress()
    assert stored.total_score == 200
    assert stored.completed_challenges == 2
    assert stored.current_streak == 1
    assert stored.credited_ids == {"a", "b"}


async def test_activity_days_are_distinct_and_newest_first(store):
    for day in (date(2024, 3, 1), date(2024, 3, 3), date(2024, 3, 1), date(2024, 3, 2)):
        await store.record_activity(day)
    assert await store.activity_days() == [
        date(2024, 3, 3),
        date(2024, 3, 2),
        date(2024, 3, 1),
    ]
    assert await store.activity_days(limit=1) == [date(2024, 3, 3)]


async def test_seed_if_empty():
    store = InMemoryStore()
    assert await seed_if_empty(store) == len(sample_challenges())
    assert await seed_if_empty(store) == 0
    assert await store.count_challenges() == len(sample_challenges())


async def test_database_survives_reconnect(tmp_path):
    path = tmp_path / "data.db"
    db = Database(path)
    await db.connect()
    await seed_if_empty(db)
    first = (await db.list_challenges())[0]
    first.mark_completed()
    await db.save_challenge(first)
    progress = await db.get_progress()
    progress.last_activity_date = datetime(2024, 5, 1, 9, 30)
    await db.save_progress(progress)
    await db.close()

    reopened = Database(path)
    await reopened.connect()
    assert await seed_if_empty(reopened) == 0
    again = await reopened.get_challenge(first.id)
    assert again.is_completed is True
    assert (await reopened.get_progress()).last_activity_date == datetime(2024, 5, 1, 9, 30)
    await reopened.close()


async def test_database_save_fails_when_closed(tmp_path):
    db = Database(tmp_path / "data.db")
    await db.connect()
    await db.add_challenges(sample_challenges())
    challenge = (await db.list_challenges())[0]
    await db.close()

    challenge.mark_completed()
    result = await db.save_challenge(challenge)
    assert not result.ok
    assert "not connected" in result.error
    assert not (await db.save_progress(UserProgress())).ok


async def test_database_creates_parent_directory(tmp_path):
    db = Database(tmp_path / "nested" / "dir" / "data.db")
    await db.connect()
    assert (tmp_path / "nested" / "dir" / "data.db").exists()
    await db.close()


async def test_database_connect_failure_is_storage_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")
    db = Database(blocker / "data.db")
    with pytest.raises(StorageError):
        await db.connect()
