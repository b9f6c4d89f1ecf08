"""SQLite database management."""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Optional

import aiosqlite

from ..challenges.types import Challenge, DifficultyLevel, UserProgress
from ..errors import ChallengeNotFoundError, DuplicateChallengeError, StorageError
from .base import ChallengeStore, SaveResult

logger = logging.getLogger(__name__)

_CHALLENGE_COLUMNS = (
    "id, title, problem_description, difficulty, category, time_limit, points, is_completed"
)


class Database(ChallengeStore):
    """SQLite database for persistent storage."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize the database.

        Args:
            db_path: Path to SQLite database file.
                    Defaults to ~/.local/share/codekata/data.db
        """
        if db_path is None:
            db_path = Path.home() / ".local" / "share" / "codekata" / "data.db"

        self.db_path = db_path
        self._connection: Optional[aiosqlite.Connection] = None

    async def connect(self) -> None:
        """Connect to the database."""
        try:
            if str(self.db_path) != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._connection = await aiosqlite.connect(self.db_path)
            await self._create_tables()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(f"Could not open database at {self.db_path}: {e}") from e
        logger.info("Connected to %s", self.db_path)

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    async def _create_tables(self) -> None:
        """Create database tables if they don't exist."""
        assert self._connection is not None

        await self._connection.executescript("""
            CREATE TABLE IF NOT EXISTS challenges (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT NOT NULL UNIQUE,
                title TEXT NOT NULL,
                problem_description TEXT NOT NULL,
                difficulty TEXT NOT NULL,
                category TEXT NOT NULL DEFAULT 'General',
                time_limit INTEGER NOT NULL DEFAULT 300,
                points INTEGER NOT NULL DEFAULT 100,
                is_completed BOOLEAN NOT NULL DEFAULT FALSE
            );

            CREATE TABLE IF NOT EXISTS user_progress (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                total_score INTEGER NOT NULL DEFAULT 0,
                current_streak INTEGER NOT NULL DEFAULT 0,
                completed_challenges INTEGER NOT NULL DEFAULT 0,
                last_activity_date TIMESTAMP NOT NULL,
                credited_ids TEXT NOT NULL DEFAULT '[]'
            );

            CREATE TABLE IF NOT EXISTS activity_log (
                day DATE PRIMARY KEY
            );
        """)
        await self._connection.commit()

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the database connection."""
        if self._connection is None:
            raise StorageError("Database not connected. Call connect() first.")
        return self._connection

    # Challenges
    async def list_challenges(self) -> list[Challenge]:
        """Get all challenges in insertion order."""
        async with self.connection.execute(
            f"SELECT {_CHALLENGE_COLUMNS} FROM challenges ORDER BY seq"
        ) as cursor:
            rows = await cursor.fetchall()
            return [self._row_to_challenge(row) for row in rows]

    async def get_challenge(self, challenge_id: str) -> Challenge:
        """Get a single challenge by id."""
        async with self.connection.execute(
            f"SELECT {_CHALLENGE_COLUMNS} FROM challenges WHERE id = ?",
            (challenge_id,),
        ) as cursor:
            row = await cursor.fetchone()
        if row is None:
            raise ChallengeNotFoundError(challenge_id)
        return self._row_to_challenge(row)

    async def add_challenges(self, challenges: Iterable[Challenge]) -> None:
        """Insert challenges in order, all or nothing."""
        pending = list(challenges)
        seen: set[str] = set()
        for challenge in pending:
            if challenge.id in seen:
                raise DuplicateChallengeError(challenge.id)
            seen.add(challenge.id)

        try:
            await self.connection.executemany(
                f"INSERT INTO challenges ({_CHALLENGE_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                [self._challenge_to_row(c) for c in pending],
            )
        except aiosqlite.IntegrityError:
            await self.connection.rollback()
            existing = await self._existing_ids(seen)
            raise DuplicateChallengeError(existing[0] if existing else "?") from None
        await self.connection.commit()
        logger.debug("Inserted %d challenges", len(pending))

    async def _existing_ids(self, ids: set[str]) -> list[str]:
        placeholders = ", ".join("?" for _ in ids)
        async with self.connection.execute(
            f"SELECT id FROM challenges WHERE id IN ({placeholders}) ORDER BY seq",
            tuple(ids),
        ) as cursor:
            return [row[0] for row in await cursor.fetchall()]

    async def count_challenges(self) -> int:
        """Count stored challenges."""
        async with self.connection.execute("SELECT COUNT(*) FROM challenges") as cursor:
            return (await cursor.fetchone())[0]

    async def save_challenge(self, challenge: Challenge) -> SaveResult:
        """Write a challenge's mutable fields back."""
        try:
            cursor = await self.connection.execute(
                """
                UPDATE challenges SET
                    title = ?, problem_description = ?, difficulty = ?,
                    category = ?, time_limit = ?, points = ?, is_completed = ?
                WHERE id = ?
                """,
                (
                    challenge.title,
                    challenge.problem_description,
                    challenge.difficulty.value,
                    challenge.category,
                    challenge.time_limit,
                    challenge.points,
                    challenge.is_completed,
                    challenge.id,
                ),
            )
            updated = cursor.rowcount
            await cursor.close()
            await self.connection.commit()
        except (aiosqlite.Error, StorageError) as e:
            logger.error("Saving challenge %s failed: %s", challenge.id, e)
            return SaveResult.failure(str(e))

        if updated == 0:
            logger.error("Saving challenge %s failed: no such row", challenge.id)
            return SaveResult.failure(f"Challenge not found: {challenge.id}")
        return SaveResult.success()

    # Progress
    async def get_progress(self) -> UserProgress:
        """Get the single progress row, or a default one before the first save."""
        async with self.connection.execute(
            """
            SELECT total_score, current_streak, completed_challenges, last_activity_date, credited_ids
            FROM user_progress WHERE id = 1
            """
        ) as cursor:
            row = await cursor.fetchone()

        if row is None:
            return UserProgress()

        return UserProgress(
            total_score=row[0],
            current_streak=row[1],
            completed_challenges=row[2],
            last_activity_date=datetime.fromisoformat(row[3]),
            credited_ids=set(json.loads(row[4])),
        )

    async def save_progress(self, progress: UserProgress) -> SaveResult:
        """Upsert the progress row."""
        try:
            await self.connection.execute(
                """
                INSERT INTO user_progress
                    (id, total_score, current_streak, completed_challenges, last_activity_date,
                     credited_ids)
                VALUES (1, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    total_score = excluded.total_score,
                    current_streak = excluded.current_streak,
                    completed_challenges = excluded.completed_challenges,
                    last_activity_date = excluded.last_activity_date,
                    credited_ids = excluded.credited_ids
                """,
                (
                    progress.total_score,
                    progress.current_streak,
                    progress.completed_challenges,
                    progress.last_activity_date.isoformat(),
                    json.dumps(sorted(progress.credited_ids)),
                ),
            )
            await self.connection.commit()
        except (aiosqlite.Error, StorageError) as e:
            logger.error("Saving progress failed: %s", e)
            return SaveResult.failure(str(e))
        return SaveResult.success()

    # Activity
    async def record_activity(self, day: date) -> None:
        """Log an activity day."""
        try:
            await self.connection.execute(
                "INSERT OR IGNORE INTO activity_log (day) VALUES (?)",
                (day.isoformat(),),
            )
            await self.connection.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Could not record activity: {e}") from e

    async def activity_days(self, limit: int = 30) -> list[date]:
        """Get distinct activity days, newest first."""
        async with self.connection.execute(
            "SELECT day FROM activity_log ORDER BY day DESC LIMIT ?",
            (limit,),
        ) as cursor:
            rows = await cursor.fetchall()
        return [date.fromisoformat(row[0]) for row in rows]

    @staticmethod
    def _row_to_challenge(row) -> Challenge:
        return Challenge(
            id=row[0],
            title=row[1],
            problem_description=row[2],
            difficulty=DifficultyLevel(row[3]),
            category=row[4],
            time_limit=row[5],
            points=row[6],
            is_completed=bool(row[7]),
        )

    @staticmethod
    def _challenge_to_row(challenge: Challenge) -> tuple:
        return (
            challenge.id,
            challenge.title,
            challenge.problem_description,
            challenge.difficulty.value,
            challenge.category,
            challenge.time_limit,
            challenge.points,
            challenge.is_completed,
        )
