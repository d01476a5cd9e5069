"""Shared fixtures for the study planner tests."""
import logging
import typing as t
from datetime import date, datetime, time, timedelta

import pytest

from study_scheduler.models import Availability, Task, Weekday

# A Wednesday; its week starts on Monday 2025-11-03.
FIXED_TODAY = date(2025, 11, 5)
WEEK_MONDAY = date(2025, 11, 3)


@pytest.fixture
def today() -> t.Callable[[], date]:
    """Clock pinned to a known Wednesday."""
    return lambda: FIXED_TODAY


@pytest.fixture
def make_task() -> t.Callable[..., Task]:
    """Factory for valid tasks due a few days from now."""
    def _make(title: str = "Task", effort: int = 2, days: float = 3) -> Task:
        return Task(title=title, deadline=datetime.now() + timedelta(days=days), effort=effort)
    return _make


def window(day: Weekday, start: str, end: str) -> Availability:
    """Build an availability window from "HH:MM" strings."""
    return Availability(day=day, start=time.fromisoformat(start), end=time.fromisoformat(end))


def at(day: date, hhmm: str) -> datetime:
    return datetime.combine(day, time.fromisoformat(hhmm))


@pytest.fixture
def clean_loggers():
    """Detach the application's log handlers for the duration of a test."""
    from utils.logger import LOGGER_NAMES

    loggers = [logging.getLogger(name) for name in LOGGER_NAMES]
    saved = [(logger, logger.level, list(logger.handlers)) for logger in loggers]
    for logger in loggers:
        logger.handlers = []
    yield loggers
    for logger, level, handlers in saved:
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
