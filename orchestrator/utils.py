"""Utility functions for the study planner command line."""
from __future__ import annotations

import typing as t
from datetime import datetime, time

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from study_scheduler.models import Availability, Schedule, Session, Task, Weekday

console = Console()

DEADLINE_FORMAT = "%Y-%m-%d %H:%M"


def parse_time(value: str) -> time:
    """Parse a time of day in H:MM or HH:MM form.

    Args:
        value: e.g. "9:00", "09:00", "17:30".

    Returns:
        The parsed time.

    Raises:
        ValueError: If the value is not a valid time of day.
    """
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid time {value!r}; use HH:MM (e.g. 09:00)")
    hour, minute = (int(part) for part in parts)
    try:
        return time(hour, minute)
    except ValueError:
        raise ValueError(f"Invalid time {value!r}; use HH:MM (e.g. 09:00)") from None


def parse_deadline(value: str) -> datetime:
    """Parse a deadline in YYYY-MM-DD HH:MM form."""
    try:
        return datetime.strptime(value.strip(), DEADLINE_FORMAT)
    except ValueError:
        raise ValueError(
            f"Invalid date {value!r}; use YYYY-MM-DD HH:MM (e.g. 2025-12-01 14:30)"
        ) from None


def parse_positive_int(value: str, what: str) -> int:
    try:
        number = int(value.strip())
    except ValueError:
        raise ValueError(f"Invalid number for {what}: {value!r}") from None
    if number <= 0:
        raise ValueError(f"{what.capitalize()} must be a positive number")
    return number


def truncate_title(title: str, max_length: int = 45) -> str:
    """Truncate title to max_length characters, adding ellipsis if needed."""
    if len(title) <= max_length:
        return title
    return title[:max_length-3] + "..."


def session_title(session: Session) -> str:
    return session.task.title if session.task is not None else "(No task assigned)"


def create_availability_table(availability: t.Sequence[Availability]) -> Table:
    table = Table(title="🗓️  Weekly Availability", show_header=True, header_style="bold magenta")
    table.add_column("Day", style="cyan")
    table.add_column("From", style="yellow")
    table.add_column("To", style="yellow")
    for window in sorted(availability, key=lambda w: (w.day, w.start)):
        table.add_row(window.day.label, f"{window.start:%H:%M}", f"{window.end:%H:%M}")
    return table


def create_tasks_table(tasks: t.Sequence[Task], title: str = "📚 Your Tasks") -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Title", style="white")
    table.add_column("Course", style="green")
    table.add_column("Deadline", style="yellow")
    table.add_column("Effort", justify="right")
    for idx, task in enumerate(tasks, 1):
        table.add_row(
            str(idx),
            escape(truncate_title(task.title)),
            escape(task.course.name) if task.course is not None else "-",
            f"{task.deadline:%b %d, %H:%M}",
            f"{task.effort}h",
        )
    return table


def create_schedule_table(schedule: Schedule) -> Table:
    """Create a table of the schedule's sessions grouped by weekday."""
    table = Table(
        title=f"📅 Week of {schedule.week_start:%b %d, %Y}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Day", style="cyan")
    table.add_column("Time", style="yellow")
    table.add_column("Task", style="white")
    table.add_column("Done", justify="center")

    for day in Weekday:
        daily = sorted(schedule.view_daily(day), key=lambda s: s.start)
        for idx, session in enumerate(daily):
            table.add_row(
                day.label if idx == 0 else "",
                f"{session.start:%H:%M} → {session.end:%H:%M}",
                escape(truncate_title(session_title(session))),
                "✅" if session.completed else "-",
            )
    return table


def create_sessions_table(sessions: t.Sequence[Session]) -> Table:
    """Create a numbered table of sessions for selection."""
    table = Table(title="🧾 Sessions", show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", width=4)
    table.add_column("When", style="yellow")
    table.add_column("Task", style="white")
    table.add_column("Status")
    for idx, session in enumerate(sessions, 1):
        status = "[green]COMPLETED[/green]" if session.completed else "PENDING"
        table.add_row(
            str(idx),
            f"{session.start:%a %H:%M}-{session.end:%H:%M}",
            escape(truncate_title(session_title(session))),
            status,
        )
    return table
