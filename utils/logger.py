# utils/logger.py
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Top-level packages whose module loggers are routed to the log file
LOGGER_NAMES = ("study_scheduler", "planner", "orchestrator")


def setup_logging(log_path: Path, level: str = "INFO", console: Console = None) -> None:
    """Send application logs to a file and, for warnings and above, to the console.

    :param log_path: File receiving every record at ``level`` and above.
    :param level: Level name such as "INFO" or "DEBUG".
    :param console: Rich console for warnings. Defaults to stderr.
    """
    loggers = [logging.getLogger(name) for name in LOGGER_NAMES]
    for logger in loggers:
        logger.setLevel(level)

    # Prevent duplicate handlers if called more than once
    if any(logger.handlers for logger in loggers):
        return

    log_path.parent.mkdir(parents=True, exist_ok=True)

    # File handler
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    # Console handler, kept quiet so it does not interleave with the menus
    console_handler = RichHandler(
        console=console or Console(stderr=True),
        level=logging.WARNING,
        show_path=False,
    )

    for logger in loggers:
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
