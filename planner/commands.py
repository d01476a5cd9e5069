# -*- coding: utf-8 -*-
"""
Undoable planner actions.

Adding a task and marking a session complete are wrapped in commands so the
command-line application can undo and redo them.
"""
from __future__ import annotations

import abc
import logging
import typing as t
from datetime import datetime

from planner.student import Student
from planner.task_factory import TaskType, create_task
from study_scheduler.models import Session, Task

logger = logging.getLogger(__name__)


class Command(abc.ABC):
    """An action that can be executed and undone."""

    @abc.abstractmethod
    def execute(self) -> None: ...

    @abc.abstractmethod
    def undo(self) -> None: ...

    @abc.abstractmethod
    def is_undoable(self) -> bool: ...


class AddTaskCommand(Command):
    """Adds a task to a student's task list; undo removes it again."""

    def __init__(
            self,
            student: Student,
            title: str,
            deadline: datetime,
            effort: int,
            task_type: t.Optional[TaskType] = None,
    ) -> None:
        self.student = student
        self.title = title
        self.deadline = deadline
        self.effort = effort
        self.task_type = task_type
        self.created_task: t.Optional[Task] = None
        self.executed = False

    def execute(self) -> None:
        if self.executed:
            return
        if self.created_task is None:
            if self.task_type is not None:
                self.created_task = self.student.add_existing_task(
                    create_task(self.task_type, self.title, self.deadline, self.effort)
                )
            else:
                self.created_task = self.student.add_task(self.title, self.deadline, self.effort)
        else:
            # Redo puts back the very task that was undone.
            self.student.add_existing_task(self.created_task)
        self.executed = True

    def undo(self) -> None:
        if not self.executed or self.created_task is None:
            return
        if not self.student.remove_task(self.created_task):
            logger.warning("Could not remove task '%s', it may have already been removed", self.title)
        self.executed = False

    def is_undoable(self) -> bool:
        return self.executed and self.created_task is not None


class CompleteSessionCommand(Command):
    """Marks a session complete; undo makes it pending again."""

    def __init__(self, student: Student, session: Session) -> None:
        self.student = student
        self.session = session
        self.was_completed = session.completed
        self.executed = False

    def execute(self) -> None:
        if not self.executed and not self.session.completed:
            self.student.mark_session_complete(self.session)
            self.executed = True

    def undo(self) -> None:
        if self.executed and not self.was_completed:
            self.session.completed = False
            logger.info("Session completion undone: %r", self.session)
            self.executed = False

    def is_undoable(self) -> bool:
        return self.executed and not self.was_completed


class CommandManager:
    """Executes commands and keeps undo/redo history."""

    def __init__(self) -> None:
        self._history: list[Command] = []
        self._redo: list[Command] = []

    def execute_command(self, command: Command) -> None:
        command.execute()
        if command.is_undoable():
            self._history.append(command)
            self._redo.clear()

    def undo(self) -> bool:
        """Undo the most recent command; return False if there was nothing to undo."""
        if not self._history:
            return False
        command = self._history.pop()
        try:
            command.undo()
        except Exception:
            self._history.append(command)
            raise
        self._redo.append(command)
        return True

    def redo(self) -> bool:
        """Re-execute the most recently undone command; return False if there was nothing to redo.

        A command whose re-execution fails stays on the redo stack.
        """
        if not self._redo:
            return False
        command = self._redo.pop()
        try:
            command.execute()
        except Exception:
            self._redo.append(command)
            raise
        self._history.append(command)
        return True

    def can_undo(self) -> bool:
        return bool(self._history)

    def can_redo(self) -> bool:
        return bool(self._redo)
