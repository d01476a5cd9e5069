# -*- coding: utf-8 -*-
"""
The student: owner of tasks, weekly availability and the current schedule.

The student is the caller the scheduling engine serves. It validates the
availability it is given (no two windows on the same weekday may overlap),
keeps the most recently generated schedule and notifies observers about new
tasks, approaching deadlines and completed sessions.
"""
from __future__ import annotations

import logging
import typing as t
from datetime import datetime, timedelta

from planner.notifications import StudyObserver
from study_scheduler.exceptions import OverlappingAvailabilityError, ScheduleNotFoundError, SessionNotFoundError
from study_scheduler.models import Availability, Schedule, Session, Task

logger = logging.getLogger(__name__)

DEADLINE_WARNING_WINDOW = timedelta(hours=48)


class Student:
    """A student with tasks, availability and a schedule."""

    def __init__(self, student_id: str, name: str) -> None:
        self.student_id = student_id
        self.name = name
        self.tasks: list[Task] = []
        self.availability: list[Availability] = []
        self.schedule: t.Optional[Schedule] = None
        self._observers: list[StudyObserver] = []

    def add_observer(self, observer: StudyObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: StudyObserver) -> None:
        self._observers.remove(observer)

    def add_task(self, title: str, deadline: datetime, effort: int) -> Task:
        """Create, validate and add a task.

        :raises InvalidTaskError: If the title is empty, the effort negative or the deadline past.
        """
        return self.add_existing_task(Task(title=title, deadline=deadline, effort=effort))

    def add_existing_task(self, task: Task) -> Task:
        self.tasks.append(task)
        logger.info("Task added: %s", task.title)
        for observer in self._observers:
            observer.on_task_added(task)
        self._check_deadline_approaching(task)
        return task

    def remove_task(self, task: Task) -> bool:
        """Remove a task by identity; return whether it was present."""
        for index, existing in enumerate(self.tasks):
            if existing is task:
                del self.tasks[index]
                logger.info("Task removed: %s", task.title)
                for observer in self._observers:
                    observer.on_task_removed(task)
                return True
        return False

    def _check_deadline_approaching(self, task: Task) -> None:
        remaining = task.deadline - datetime.now()
        if timedelta(0) < remaining <= DEADLINE_WARNING_WINDOW:
            for observer in self._observers:
                observer.on_task_deadline_approaching(task)

    def set_availability(self, availability: t.Iterable[Availability]) -> None:
        """Replace the weekly availability.

        :raises OverlappingAvailabilityError: If two windows on the same weekday overlap.
        """
        entries = list(availability)
        for i, first in enumerate(entries):
            for second in entries[i + 1:]:
                if first.overlaps(second):
                    raise OverlappingAvailabilityError(
                        f"Availability slots cannot overlap on the same day ({first.day.label})"
                    )
        self.availability = entries

    def mark_session_complete(self, session: Session) -> None:
        """Complete a session of the current schedule.

        :raises ScheduleNotFoundError: If no schedule has been generated yet.
        :raises SessionNotFoundError: If the session is not part of the current schedule.
        """
        if self.schedule is None:
            raise ScheduleNotFoundError("No schedule exists yet")
        if not self.schedule.contains(session):
            raise SessionNotFoundError("Session not found in the current schedule")

        session.complete()
        logger.info("Session completed: %r", session)
        for observer in self._observers:
            observer.on_session_completed(session)
