"""Tests for typed task creation."""
from datetime import datetime, timedelta

import pytest

from planner.task_factory import TaskType, create_task
from study_scheduler.exceptions import InvalidTaskError


@pytest.mark.parametrize("task_type, expected", [
    (TaskType.ASSIGNMENT, "[Assignment] Essay"),
    (TaskType.EXAM, "[Exam Prep] Essay"),
    (TaskType.PROJECT, "[Project] Essay"),
    (TaskType.REVIEW, "[Review] Essay"),
])
def test_title_is_prefixed_with_type(task_type: TaskType, expected: str) -> None:
    task = create_task(task_type, "  Essay ", datetime.now() + timedelta(days=2), 3)

    assert task.title == expected
    assert task.effort == 3


def test_blank_title_is_rejected() -> None:
    with pytest.raises(InvalidTaskError):
        create_task(TaskType.PROJECT, "   ", datetime.now() + timedelta(days=2), 3)


def test_task_validation_still_applies() -> None:
    with pytest.raises(InvalidTaskError):
        create_task(TaskType.REVIEW, "Notes", datetime.now() + timedelta(days=2), -1)
