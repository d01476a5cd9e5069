"""Splitting a task's effort into bounded-length session placeholders."""
from __future__ import annotations

from study_scheduler.models import SessionPlaceholder, Task

MAX_SESSION_HOURS = 2


def session_durations(effort: int, max_hours: int = MAX_SESSION_HOURS) -> list[int]:
    """Return the durations, in hours, that ``effort`` decomposes into.

    Each duration is ``min(max_hours, remaining)`` until nothing remains, so an
    effort of 5 gives ``[2, 2, 1]`` and an effort of 0 gives ``[]``.

    :param effort: Total effort in whole hours.
    :param max_hours: Longest allowed session.
    :return: The ordered list of durations.
    """
    if effort < 0:
        raise ValueError("Effort cannot be negative")
    if max_hours <= 0:
        raise ValueError("Maximum session length must be positive")

    durations = []
    remaining = effort
    while remaining > 0:
        duration = min(max_hours, remaining)
        durations.append(duration)
        remaining -= duration
    return durations


def split_into_sessions(task: Task, max_hours: int = MAX_SESSION_HOURS) -> list[SessionPlaceholder]:
    """Decompose a task into session placeholders owned by that task."""
    return [
        SessionPlaceholder(duration_hours=duration, task=task)
        for duration in session_durations(task.effort, max_hours)
    ]
