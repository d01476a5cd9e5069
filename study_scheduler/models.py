"""
Data models for the study scheduling engine.

This module contains the dataclasses used to describe weekly availability,
study tasks, session placeholders produced by decomposition, placed sessions
and the weekly schedule that holds them.
"""
from __future__ import annotations

import enum
import typing as t
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time, timedelta

from study_scheduler.exceptions import InvalidAvailabilityError, InvalidTaskError


class Weekday(enum.IntEnum):
    """Day of the week, numbered like ``date.weekday()``."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> Weekday:
        return cls(day.weekday())

    @classmethod
    def parse(cls, value: str) -> Weekday:
        """Parse a weekday from its name or a prefix of at least three letters.

        :param value: e.g. "Monday", "mon", "WED".
        :return: The matching Weekday.
        :raises ValueError: If the value does not name a weekday.
        """
        key = value.strip().upper()
        if len(key) >= 3:
            for day in cls:
                if day.name.startswith(key):
                    return day
        raise ValueError(f"Unknown weekday: {value!r}")

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Availability:
    """A window of free time on one day of the week."""
    day: Weekday
    start: time
    end: time

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "day", Weekday(self.day))
        except ValueError:
            raise InvalidAvailabilityError(f"Invalid weekday: {self.day!r}") from None
        if self.start > self.end:
            raise InvalidAvailabilityError("Start time cannot be after end time")

    def with_times(self, start: t.Optional[time] = None, end: t.Optional[time] = None) -> Availability:
        """Return a copy with a new start and/or end, re-validating the range."""
        return replace(
            self,
            start=self.start if start is None else start,
            end=self.end if end is None else end,
        )

    def describe(self) -> str:
        return f"Available on {self.day.label} from {self.start:%H:%M} to {self.end:%H:%M}"

    def overlaps(self, other: Availability) -> bool:
        """Whether two windows on the same weekday share any time (touching is fine)."""
        if self.day != other.day:
            return False
        return not (self.end <= other.start or other.end <= self.start)


@dataclass(eq=False)
class Task:
    """A unit of study work with a deadline and an effort estimate in whole hours."""
    title: str
    deadline: datetime
    effort: int
    course: t.Optional[Course] = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise InvalidTaskError("Task title cannot be empty")
        _validate_effort(self.effort)
        if self.deadline < datetime.now():
            raise InvalidTaskError("Task deadline cannot be in the past")

    def update_estimate(self, new_effort: int) -> None:
        _validate_effort(new_effort)
        self.effort = new_effort

    def __repr__(self) -> str:
        return f"Task({self.title!r}, deadline={self.deadline:%Y-%m-%d %H:%M}, effort={self.effort})"


def _validate_effort(effort: int) -> None:
    if effort < 0:
        raise InvalidTaskError("Task effort cannot be negative")


@dataclass(eq=False)
class Course:
    """A course and the tasks that belong to it."""
    name: str
    instructor: str
    tasks: list[Task] = field(default_factory=list)

    def associate_task(self, task: Task) -> None:
        """Add ``task`` to this course and point the task back at it.

        :raises InvalidTaskError: If no task is given.
        """
        if task is None:
            raise InvalidTaskError("Task cannot be None")
        self.tasks.append(task)
        task.course = self

    def __repr__(self) -> str:
        return f"Course({self.name!r}, instructor={self.instructor!r}, tasks={len(self.tasks)})"


@dataclass(frozen=True)
class SessionPlaceholder:
    """A not-yet-scheduled piece of a task: a duration without a calendar time."""
    duration_hours: int
    task: Task

    @property
    def duration(self) -> timedelta:
        return timedelta(hours=self.duration_hours)


@dataclass(eq=False)
class Session:
    """A study session placed at an absolute time."""
    start: datetime
    end: datetime
    task: t.Optional[Task] = None
    completed: bool = False

    def complete(self) -> None:
        self.completed = True

    @property
    def date(self) -> date:
        return self.start.date()

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __repr__(self) -> str:
        title = self.task.title if self.task is not None else None
        return (
            f"Session({self.start:%a %Y-%m-%d %H:%M}-{self.end:%H:%M}, "
            f"task={title!r}, completed={self.completed})"
        )


@dataclass
class Schedule:
    """The placed sessions of one calendar week, in insertion order."""
    week_start: date
    sessions: list[Session] = field(default_factory=list)

    def add_session(self, session: Session) -> None:
        self.sessions.append(session)

    def view_daily(self, day: Weekday) -> list[Session]:
        """Sessions starting on the given weekday, in insertion order."""
        return [s for s in self.sessions if s.start.weekday() == day]

    def sessions_on(self, day: date) -> list[Session]:
        """Sessions starting on the given calendar date, in insertion order."""
        return [s for s in self.sessions if s.date == day]

    def week_days(self) -> list[date]:
        """The seven dates of the week, Monday through Sunday."""
        return [self.week_start + timedelta(days=offset) for offset in range(7)]

    def contains(self, session: Session) -> bool:
        return any(s is session for s in self.sessions)

    def __len__(self) -> int:
        return len(self.sessions)

    def __iter__(self) -> t.Iterator[Session]:
        return iter(self.sessions)
