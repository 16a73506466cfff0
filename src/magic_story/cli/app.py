"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

# Create Typer app
app = typer.Typer(
    name="magic-story",
    help="Personalized children's stories and illustrations",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands."""
    from .commands import check_config, generate, styles

    app.command(name="generate")(generate)
    app.command(name="check-config")(check_config)
    app.command(name="styles")(styles)


def setup_logging(log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sets up file logging for AI calls
    """
    if log_dir is None:
        log_dir = Path.cwd() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    # Provider request/response timing, never keys or photo data
    ai_calls_logger = logging.getLogger("ai_calls")
    ai_calls_logger.setLevel(logging.DEBUG)
    ai_calls_logger.propagate = False
    ai_calls_logger.handlers = []
    ai_file_handler = logging.FileHandler(log_dir / "ai_calls.log", encoding="utf-8")
    ai_file_handler.setLevel(logging.DEBUG)
    ai_file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    )
    ai_calls_logger.addHandler(ai_file_handler)


register_commands()


def main() -> None:
    """CLI entry point."""
    setup_logging()
    app()
