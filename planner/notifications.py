# -*- coding: utf-8 -*-
"""Observers notified about study events."""
from __future__ import annotations

import typing as t
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from study_scheduler.models import Session, Task


class StudyObserver(t.Protocol):
    """Receives notifications from a Student."""

    def on_task_added(self, task: Task) -> None: ...

    def on_task_removed(self, task: Task) -> None: ...

    def on_task_deadline_approaching(self, task: Task) -> None: ...

    def on_session_completed(self, session: Session) -> None: ...


class NotificationService:
    """Prints study notifications to the console."""

    def __init__(self, console: t.Optional[Console] = None) -> None:
        self.console = console or Console()

    def on_task_added(self, task: Task) -> None:
        self.console.print(
            f"📋 New task added: [bold]{escape(task.title)}[/bold] (Due: {task.deadline:%Y-%m-%d %H:%M})"
        )

    def on_task_removed(self, task: Task) -> None:
        self.console.print(f"🗑️  Task removed: [bold]{escape(task.title)}[/bold]")

    def on_task_deadline_approaching(self, task: Task) -> None:
        days_left = (task.deadline - datetime.now()).days
        self.console.print(
            f"[yellow]⚠️  Deadline approaching for: [bold]{escape(task.title)}[/bold] ({days_left} days left)[/yellow]"
        )

    def on_session_completed(self, session: Session) -> None:
        title = session.task.title if session.task is not None else "Untitled session"
        self.console.print(
            f"[green]✅ Session completed: [bold]{escape(title)}[/bold] at {session.end:%a %H:%M}[/green]"
        )
