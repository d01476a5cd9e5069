# -*- coding: utf-8 -*-
"""Creation of typed study tasks."""
from __future__ import annotations

import enum
from datetime import datetime

from study_scheduler.exceptions import InvalidTaskError
from study_scheduler.models import Task


class TaskType(enum.Enum):
    ASSIGNMENT = "Assignment"
    EXAM = "Exam Prep"
    PROJECT = "Project"
    REVIEW = "Review"


def create_task(task_type: TaskType, title: str, deadline: datetime, effort: int) -> Task:
    """Create a task whose title is prefixed with its type, e.g. "[Exam Prep] Calculus".

    :param task_type: Kind of task.
    :param title: Title entered by the student.
    :param deadline: When the task is due.
    :param effort: Estimated effort in whole hours.
    :return: A validated Task.
    """
    # The prefix would otherwise hide a blank title from Task's own check.
    if not title or not title.strip():
        raise InvalidTaskError("Task title cannot be empty")
    return Task(title=f"[{task_type.value}] {title.strip()}", deadline=deadline, effort=effort)
