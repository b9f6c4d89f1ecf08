"""Entry point for CodeKata."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .errors import CodeKataError
from .logger import configure_logging
from .settings import LOG_LEVELS, Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codekata",
        description="Practise coding challenges in the terminal",
    )
    parser.add_argument("--db", type=Path, help="Path to the SQLite database file")
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Keep challenges in memory only; nothing is saved",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Don't add the sample challenges to an empty store",
    )
    parser.add_argument(
        "--require-solution",
        action="store_true",
        help="Reject blank solutions on submit",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (e.g. DEBUG)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the challenge list and exit",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    overrides = {}
    if args.db is not None:
        overrides["db_path"] = args.db
    if args.memory:
        overrides["storage"] = "memory"
    if args.no_seed:
        overrides["seed_on_empty"] = False
    if args.require_solution:
        overrides["require_solution"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    return Settings(**overrides)


async def print_challenges(settings: Settings) -> None:
    """Print one line per challenge."""
    from .storage import seed_if_empty
    from .ui.app import build_store

    store = build_store(settings)
    await store.connect()
    try:
        if settings.seed_on_empty:
            await seed_if_empty(store)
        for challenge in await store.list_challenges():
            mark = "✔" if challenge.is_completed else " "
            print(
                f"{mark} {challenge.difficulty.glyph} {challenge.title}"
                f" ({challenge.points} pts)"
            )
    finally:
        await store.close()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CodeKata application."""
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_dir, settings.log_level)

    if args.list:
        try:
            asyncio.run(print_challenges(settings))
        except CodeKataError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    from .ui.app import CodeKataApp

    app = CodeKataApp(settings)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
