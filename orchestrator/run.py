# -*- coding: utf-8 -*-
import logging
import typing as t

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from config.settings import load_settings
from orchestrator.utils import (console, create_availability_table, create_schedule_table, create_sessions_table,
                                create_tasks_table, parse_deadline, parse_positive_int, parse_time)
from planner.commands import AddTaskCommand, CommandManager, CompleteSessionCommand
from planner.notifications import NotificationService
from planner.prioritizer import TaskPrioritizer
from planner.student import Student
from planner.task_factory import TaskType
from study_scheduler.decomposition import session_durations
from study_scheduler.exceptions import StudyPlannerError
from study_scheduler.models import Availability, Weekday
from study_scheduler.scheduler import Scheduler
from study_scheduler.strategies import STRATEGIES, get_strategy
from utils.logger import setup_logging

logger = logging.getLogger(__name__)

MENU = (
    "Add a task",
    "View current tasks",
    "Generate schedule",
    "View schedule",
    "Mark session as complete",
    "Undo last action",
    "Redo last action",
    "Exit",
)

STRATEGY_DESCRIPTIONS = {
    "priority": "Priority-based (packs urgent tasks as early as possible)",
    "time-block": "Time-block (consistent study blocks from 09:00)",
    "balanced": "Balanced (late-morning and early-afternoon slots first)",
}


class PlannerApp:
    """Interactive menu loop around a Student and the scheduling engine."""

    def __init__(
            self,
            student: Student,
            prioritizer: TaskPrioritizer,
            strategy: t.Optional[str] = None,
            default_strategy: str = "priority",
            console: Console = console,
            stream: t.Optional[t.TextIO] = None,
    ) -> None:
        """
        Args:
            student: The student whose plan is being edited.
            prioritizer: Orders tasks before scheduling.
            strategy: Fixed strategy name; when None the user is asked on every generation.
            default_strategy: Strategy offered as the default when asking.
            console: Where output goes.
            stream: Where answers are read from; None reads standard input.
        """
        self.student = student
        self.prioritizer = prioritizer
        self.strategy = strategy
        self.default_strategy = default_strategy
        self.console = console
        self.stream = stream
        self.commands = CommandManager()

    def ask(self, prompt: str) -> str:
        line = self.console.input(f"{prompt}: ", stream=self.stream)
        if self.stream is not None and line == "":
            raise EOFError
        return line.strip()

    def error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def collect_availability(self) -> list[Availability]:
        """Ask for a study window on each day of the week."""
        self.console.print("\n[bold cyan]Let's set up your weekly availability.[/bold cyan]")
        availability = []
        for day in Weekday:
            self.console.print(f"\n[bold]{day.label}[/bold]")
            if self.ask("  Available? (y/n)").lower() not in ("y", "yes"):
                continue
            try:
                start = parse_time(self.ask("  Start time (HH:MM, e.g. 09:00)"))
                end = parse_time(self.ask("  End time (HH:MM, e.g. 17:00)"))
                window = Availability(day=day, start=start, end=end)
            except ValueError as e:
                self.error(f"{e}. Skipping {day.label}.")
                continue
            availability.append(window)
            self.console.print(f"  Added availability: {start:%H:%M} - {end:%H:%M}")
        return availability

    def add_task(self) -> None:
        self.console.print("\n[bold cyan]📝 Add a Task[/bold cyan]")
        title = self.ask("Task title")
        if not title:
            self.error("Task title cannot be empty!")
            return

        types = list(TaskType)
        for idx, task_type in enumerate(types, 1):
            self.console.print(f"  {idx}. {task_type.value}")
        choice = self.ask(f"Task type (1-{len(types)})")
        if choice.isdigit() and 1 <= int(choice) <= len(types):
            task_type = types[int(choice) - 1]
        else:
            self.console.print("[yellow]Invalid choice, using Assignment.[/yellow]")
            task_type = TaskType.ASSIGNMENT

        try:
            deadline = parse_deadline(self.ask("Deadline (YYYY-MM-DD HH:MM)"))
            effort = parse_positive_int(self.ask("Estimated effort (hours)"), "effort")
            self.commands.execute_command(AddTaskCommand(self.student, title, deadline, effort, task_type))
        except (StudyPlannerError, ValueError) as e:
            self.error(str(e))

    def view_tasks(self) -> None:
        if not self.student.tasks:
            self.console.print("\nNo tasks added yet.")
            return
        self.console.print("\n", create_tasks_table(self.student.tasks))

    def choose_strategy(self) -> str:
        if self.strategy is not None:
            return self.strategy
        names = list(STRATEGIES)
        for idx, name in enumerate(names, 1):
            self.console.print(f"  {idx}. {STRATEGY_DESCRIPTIONS.get(name, name)}")
        choice = self.ask(f"Choose strategy (1-{len(names)}, Enter for {self.default_strategy})")
        if not choice:
            return self.default_strategy
        if choice.isdigit() and 1 <= int(choice) <= len(names):
            return names[int(choice) - 1]
        self.console.print(f"[yellow]Invalid choice, using {self.default_strategy}.[/yellow]")
        return self.default_strategy

    def generate_schedule(self) -> None:
        if not self.student.tasks:
            self.console.print("\nNo tasks available to schedule. Add tasks first.")
            return

        with self.console.status("[bold green]Prioritizing tasks..."):
            prioritized = self.prioritizer.prioritize(self.student.tasks)
        self.console.print("\n", create_tasks_table(prioritized, title="🎯 Priority Order"))

        strategy_name = self.choose_strategy()
        scheduler = Scheduler(get_strategy(strategy_name))
        schedule = scheduler.generate_schedule(prioritized, self.student.availability)
        self.student.schedule = schedule

        expected = sum(len(session_durations(task.effort)) for task in prioritized)
        logger.info("Generated %s schedule with %d of %d sessions", strategy_name, len(schedule), expected)

        stats_text = Text()
        stats_text.append("Strategy: ", style="white")
        stats_text.append(strategy_name, style="bold cyan")
        stats_text.append("\nSessions placed: ", style="white")
        stats_text.append(f"{len(schedule)} of {expected}", style="bold green")
        if len(schedule) < expected:
            stats_text.append("\nNot every session fits this week's availability.", style="yellow")
        self.console.print(Panel(stats_text, title="📊 Schedule generated", border_style="green"))

    def view_schedule(self) -> None:
        schedule = self.student.schedule
        if schedule is None or not schedule.sessions:
            self.console.print("\nNo schedule generated yet. Generate a schedule first.")
            return
        self.console.print("\n", create_schedule_table(schedule))
        self.console.print(f"Total sessions: {len(schedule)}")

    def mark_session_complete(self) -> None:
        schedule = self.student.schedule
        if schedule is None or not schedule.sessions:
            self.console.print("\nNo schedule available. Generate a schedule first.")
            return

        sessions = schedule.sessions
        self.console.print("\n", create_sessions_table(sessions))
        choice = self.ask("Session number to mark as complete")
        if not choice.isdigit() or not 1 <= int(choice) <= len(sessions):
            self.error("Invalid session number!")
            return

        session = sessions[int(choice) - 1]
        if session.completed:
            self.console.print("[yellow]Session is already marked as complete![/yellow]")
            return
        try:
            self.commands.execute_command(CompleteSessionCommand(self.student, session))
        except StudyPlannerError as e:
            self.error(str(e))

    def undo(self) -> None:
        try:
            undone = self.commands.undo()
        except StudyPlannerError as e:
            self.error(f"Could not undo: {e}")
            return
        self.console.print("↩️  Undone." if undone else "No commands to undo.")

    def redo(self) -> None:
        try:
            redone = self.commands.redo()
        except StudyPlannerError as e:
            # e.g. completing a session from a schedule that has since been regenerated
            self.error(f"Could not redo: {e}")
            return
        self.console.print("↪️  Redone." if redone else "No commands to redo.")

    def run(self) -> None:
        actions = (
            self.add_task,
            self.view_tasks,
            self.generate_schedule,
            self.view_schedule,
            self.mark_session_complete,
            self.undo,
            self.redo,
        )
        while True:
            self.console.print("\n[bold blue]=== Main Menu ===[/bold blue]")
            for idx, label in enumerate(MENU, 1):
                self.console.print(f"{idx}. {label}")
            try:
                choice = self.ask("Choose an option")
            except EOFError:
                break
            if choice == str(len(MENU)):
                break
            if choice.isdigit() and 1 <= int(choice) <= len(actions):
                try:
                    actions[int(choice) - 1]()
                except EOFError:
                    break
            else:
                self.console.print("Invalid option. Please try again.")
        self.console.print("\n[bold green]Thank you for using Smart Study Planner![/bold green]")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--name", prompt="Enter your name", help="Student name.")
@click.option("--student-id", prompt="Enter your student ID", help="Student ID.")
@click.option(
    "--strategy",
    type=click.Choice(list(STRATEGIES), case_sensitive=False),
    default=None,
    help="Scheduling strategy to always use instead of asking.",
)
@click.option("--no-ai", is_flag=True, help="Order tasks by deadline without calling the LLM.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to the log file.")
def main(name: str, student_id: str, strategy: t.Optional[str], no_ai: bool, verbose: bool) -> None:
    """Smart Study Planner: turn study tasks and weekly availability into a schedule."""
    settings = load_settings()
    setup_logging(settings.log_path, "DEBUG" if verbose else settings.log_level)

    if settings.strategy not in STRATEGIES:
        raise click.BadParameter(
            f"STUDY_PLANNER_STRATEGY must be one of {', '.join(STRATEGIES)}", param_hint="environment"
        )

    console.print(
        Panel.fit(
            f"[bold blue]📚 Smart Study Planner[/bold blue]\nWelcome, [bold]{name}[/bold]!",
            border_style="blue",
        )
    )

    student = Student(student_id=student_id, name=name)
    student.add_observer(NotificationService(console))

    prioritizer = TaskPrioritizer() if no_ai else TaskPrioritizer.from_settings(settings)
    if prioritizer.client is None and not no_ai:
        console.print("[yellow]OPENAI_API_KEY is not set; tasks will be ordered by deadline.[/yellow]")

    app = PlannerApp(
        student,
        prioritizer,
        strategy=strategy.lower() if strategy else None,
        default_strategy=settings.strategy,
        console=console,
    )
    try:
        student.set_availability(app.collect_availability())
    except EOFError:
        return
    if student.availability:
        console.print("\n", create_availability_table(student.availability))
    app.run()


if __name__ == "__main__":
    main()
