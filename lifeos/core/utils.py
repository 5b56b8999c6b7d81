"""Shared utility functions for the LIFE OS ledger service."""

import logging
from datetime import UTC, datetime
from pathlib import Path

import colorlog

PROJECT_LOGGER = "lifeos"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a colorized format for the project.

    Handlers live on the ``lifeos`` logger only; module loggers such as ``lifeos.ledger`` propagate to
    it, so a file handler added there by ``setup_logging`` receives every project record.
    """
    project_logger = logging.getLogger(PROJECT_LOGGER)
    if not project_logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        project_logger.addHandler(handler)
        project_logger.setLevel(logging.INFO)
    project_logger.propagate = False
    return logging.getLogger(name)


def ensure_dir(path: str | Path) -> None:
    """Ensure a directory exists (like mkdir -p)."""
    Path(path).mkdir(parents=True, exist_ok=True)


def utcnow_iso() -> str:
    """Get the current UTC time as an ISO8601 string."""
    return datetime.now(UTC).isoformat()


def truncate(text: str, limit: int) -> str:
    """Shorten text for log lines, marking the cut with an ellipsis."""
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text
