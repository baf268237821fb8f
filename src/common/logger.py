"""Logging utilities with rich output for the git-refs CLI.

Library modules log through ``get_logger(__name__)``; the CLI calls
``setup_logging()`` once and uses the console helpers for user-facing
status lines.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Skipping group/project@abc...def: project not found")
    logger.info("Rendered notes.md")
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from .env import env

# Global console instance for consistent output
console = Console()
err_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=err_console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=False,  # matched text may contain brackets
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses LOG_LEVEL from the environment or INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Keep propagation so pytest's caplog sees filter decisions
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger for a CLI run.

    Args:
        level: Default logging level, overridden by LOG_LEVEL
        log_file: Optional file path to also log to a file
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(env.log_level(default=level).upper())
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a plain progress line."""
    console.print(message, markup=False, highlight=False)


def success(message: str) -> None:
    """Print a success line with a green checkmark.

    Example:
        >>> success("Rendered 3 commit range links")
        ✓ Rendered 3 commit range links
    """
    console.print(f"[green]✓[/green] {message}", highlight=False)


def warning(message: str) -> None:
    """Print a warning line with a yellow marker."""
    console.print(f"[yellow]⚠[/yellow] {message}", highlight=False)


def error(message: str) -> None:
    """Print an error line with a red X to stderr."""
    err_console.print(f"[red]✗[/red] {message}", highlight=False)
    sys.stderr.flush()
