"""
Placement strategies for turning prioritized tasks into a weekly schedule.

Every strategy walks the tasks in the order given, splits each one into session
placeholders and places every placeholder on the first day of the current week
(Monday through Sunday) where it fits. The strategies only differ in where
within a day they look first. Placement is greedy: a placed session is never
moved to make room for a later one, and a placeholder that fits nowhere is
left out of the schedule.
"""
from __future__ import annotations

import abc
import logging
import typing as t
from datetime import date, datetime, time, timedelta

from study_scheduler.decomposition import split_into_sessions
from study_scheduler.models import Availability, Schedule, Session, SessionPlaceholder, Task, Weekday
from study_scheduler.overlap import find_overlap

logger = logging.getLogger(__name__)

TIME_BLOCK_START = time(9, 0)
TIME_BLOCK_STEP = timedelta(hours=1)
BALANCED_MORNING = time(10, 0)
BALANCED_AFTERNOON = time(14, 0)


def current_week_monday(today: date) -> date:
    """Walk back from ``today`` to the Monday of its week."""
    monday = today
    while monday.weekday() != Weekday.MONDAY:
        monday -= timedelta(days=1)
    return monday


def index_availability(availability: t.Iterable[Availability]) -> dict[Weekday, Availability]:
    """Map each weekday to its availability window. The first window listed for a day wins."""
    windows: dict[Weekday, Availability] = {}
    for window in availability:
        windows.setdefault(Weekday(window.day), window)
    return windows


class SchedulerStrategy(abc.ABC):
    """Generates a weekly schedule from a priority-ordered task list and availability."""
    name: t.ClassVar[str]

    def __init__(self, today: t.Callable[[], date] = date.today) -> None:
        """
        :param today: Returns the current date; the schedule is anchored at that date's Monday.
        """
        self._today = today

    def generate_schedule(
            self,
            tasks: t.Optional[t.Sequence[Task]],
            availability: t.Optional[t.Iterable[Availability]],
    ) -> Schedule:
        """Build a fresh schedule for the current week.

        Tasks are placed in the order given and are never re-sorted. Missing or
        empty input yields an empty schedule.

        :param tasks: Tasks, highest priority first.
        :param availability: Weekly availability windows.
        :return: A new Schedule anchored at this week's Monday.
        """
        schedule = Schedule(week_start=current_week_monday(self._today()))
        if not tasks or availability is None:
            return schedule

        windows = index_availability(availability)
        week_days = schedule.week_days()
        for task in tasks:
            for placeholder in split_into_sessions(task):
                self._place(placeholder, week_days, windows, schedule)
        return schedule

    def _place(
            self,
            placeholder: SessionPlaceholder,
            week_days: list[date],
            windows: dict[Weekday, Availability],
            schedule: Schedule,
    ) -> t.Optional[Session]:
        for day in week_days:
            window = windows.get(Weekday.of(day))
            if window is None:
                continue
            session = self._place_on_day(placeholder, day, window, schedule)
            if session is not None:
                logger.debug("%s strategy placed %r", self.name, session)
                return session
        return None

    @abc.abstractmethod
    def _place_on_day(
            self,
            placeholder: SessionPlaceholder,
            day: date,
            window: Availability,
            schedule: Schedule,
    ) -> t.Optional[Session]:
        """Try to place the placeholder on ``day`` within ``window``; return the placed session."""

    @staticmethod
    def _try_place(placeholder: SessionPlaceholder, start: datetime, schedule: Schedule) -> t.Optional[Session]:
        session = Session(start=start, end=start + placeholder.duration, task=placeholder.task)
        if find_overlap(session, schedule):
            return None
        schedule.add_session(session)
        return session

    def _place_in_earliest_gap(
            self,
            placeholder: SessionPlaceholder,
            day: date,
            window: Availability,
            schedule: Schedule,
    ) -> t.Optional[Session]:
        """Pack the session at the earliest free point of the day.

        Tries the gap before each existing session of the day, in start order,
        then the gap between the last session and the end of the window.
        """
        existing = sorted(schedule.sessions_on(day), key=lambda s: s.start)
        cursor = datetime.combine(day, window.start)

        for session in existing:
            if cursor + placeholder.duration <= session.start:
                placed = self._try_place(placeholder, cursor, schedule)
                if placed is not None:
                    return placed
            cursor = session.end

        day_end = datetime.combine(day, window.end)
        if cursor + placeholder.duration <= day_end:
            return self._try_place(placeholder, cursor, schedule)
        return None


class PriorityStrategy(SchedulerStrategy):
    """Packs every session as early in the week, and in the day, as it fits."""
    name = "priority"

    def _place_on_day(self, placeholder, day, window, schedule):
        return self._place_in_earliest_gap(placeholder, day, window, schedule)


class TimeBlockStrategy(SchedulerStrategy):
    """Builds consistent study blocks starting from 09:00.

    Starting at 09:00 (or the window start if later) it walks forward one hour
    at a time looking for a free block that ends before the window does, and
    only then falls back to the earliest free gap.
    """
    name = "time-block"

    def _place_on_day(self, placeholder, day, window, schedule):
        return (
            self._place_in_time_block(placeholder, day, window, schedule)
            or self._place_in_earliest_gap(placeholder, day, window, schedule)
        )

    def _place_in_time_block(self, placeholder, day, window, schedule) -> t.Optional[Session]:
        day_end = datetime.combine(day, window.end)
        cursor = datetime.combine(day, max(TIME_BLOCK_START, window.start))
        while cursor + placeholder.duration < day_end:
            placed = self._try_place(placeholder, cursor, schedule)
            if placed is not None:
                return placed
            cursor += TIME_BLOCK_STEP
        return None


class BalancedStrategy(SchedulerStrategy):
    """Prefers a late-morning slot, then an early-afternoon slot, then the earliest gap."""
    name = "balanced"

    def _place_on_day(self, placeholder, day, window, schedule):
        return (
            self._place_at_preferred_times(placeholder, day, window, schedule)
            or self._place_in_earliest_gap(placeholder, day, window, schedule)
        )

    @staticmethod
    def preferred_times(window: Availability) -> list[time]:
        return [max(BALANCED_MORNING, window.start), max(BALANCED_AFTERNOON, window.start)]

    def _place_at_preferred_times(self, placeholder, day, window, schedule) -> t.Optional[Session]:
        day_end = datetime.combine(day, window.end)
        for preferred in self.preferred_times(window):
            start = datetime.combine(day, preferred)
            if start + placeholder.duration > day_end:
                continue
            placed = self._try_place(placeholder, start, schedule)
            if placed is not None:
                return placed
        return None


STRATEGIES: dict[str, type[SchedulerStrategy]] = {
    PriorityStrategy.name: PriorityStrategy,
    TimeBlockStrategy.name: TimeBlockStrategy,
    BalancedStrategy.name: BalancedStrategy,
}


def get_strategy(name: str, today: t.Callable[[], date] = date.today) -> SchedulerStrategy:
    """Instantiate a strategy by name ("priority", "time-block" or "balanced")."""
    try:
        strategy_cls = STRATEGIES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown scheduling strategy {name!r}; choose one of {', '.join(STRATEGIES)}"
        ) from None
    return strategy_cls(today=today)
