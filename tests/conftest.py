import pytest

from codekata.challenges import sample_challenges
from codekata.challenges.engine import ChallengeEngine
from codekata.storage import Database, InMemoryStore


@pytest.fixture
def memory_store():
    return InMemoryStore(sample_challenges())


@pytest.fixture
async def sqlite_store(tmp_path):
    db = Database(tmp_path / "data.db")
    await db.connect()
    await db.add_challenges(sample_challenges())
    yield db
    await db.close()


@pytest.fixture(params=["memory", "sqlite"])
async def store(request, tmp_path):
    """Each store implementation, seeded with the sample challenges."""
    if request.param == "memory":
        yield InMemoryStore(sample_challenges())
        return
    db = Database(tmp_path / "data.db")
    await db.connect()
    await db.add_challenges(sample_challenges())
    yield db
    await db.close()


@pytest.fixture
def engine(store):
    return ChallengeEngine(store)
