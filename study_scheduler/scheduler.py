"""Scheduler facade holding the active placement strategy."""
from __future__ import annotations

import typing as t

from study_scheduler.models import Availability, Schedule, Session, Task
from study_scheduler.overlap import find_overlap
from study_scheduler.strategies import PriorityStrategy, SchedulerStrategy


class Scheduler:
    """Delegates schedule generation to a swappable strategy (priority-based by default)."""

    def __init__(self, strategy: t.Optional[SchedulerStrategy] = None) -> None:
        self.strategy = strategy if strategy is not None else PriorityStrategy()

    def set_strategy(self, strategy: SchedulerStrategy) -> None:
        self.strategy = strategy

    def generate_schedule(
            self,
            tasks: t.Optional[t.Sequence[Task]],
            availability: t.Optional[t.Iterable[Availability]],
    ) -> Schedule:
        return self.strategy.generate_schedule(tasks, availability)

    @staticmethod
    def find_overlap(session: Session, schedule: Schedule) -> bool:
        return find_overlap(session, schedule)
