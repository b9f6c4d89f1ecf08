"""Application logging utilities."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from textual.logging import TextualHandler

_LOG_FILE_NAME = "codekata.log"


def configure_logging(log_dir: Path, level: str = "INFO") -> logging.Logger:
    """Configure a rotating log file plus the Textual devtools console.

    Stream handlers would draw over the TUI, so console output goes through
    Textual's handler instead.
    """
    logger = logging.getLogger("codekata")
    if logger.handlers:
        return logger

    logger.setLevel(level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / _LOG_FILE_NAME,
        maxBytes=1_048_576,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    textual_handler = TextualHandler()
    textual_handler.setFormatter(formatter)
    logger.addHandler(textual_handler)

    logger.info("Logger initialised; logs available at %s", handler.baseFilename)
    return logger
