"""
Exceptions raised by the study planner.

Validation errors reject a single offending input object at construction time.
Capacity shortfalls are never raised: an unplaceable session is left out of the
schedule.
"""


class StudyPlannerError(Exception):
    """Base class for all study planner errors."""


class InvalidAvailabilityError(StudyPlannerError, ValueError):
    """Raised when an availability window starts after it ends."""


class OverlappingAvailabilityError(StudyPlannerError, ValueError):
    """Raised when two availability windows on the same weekday overlap."""


class InvalidTaskError(StudyPlannerError, ValueError):
    """Raised when a task has an empty title, a negative effort, or a past deadline."""


class ScheduleNotFoundError(StudyPlannerError):
    """Raised when an operation needs a schedule but none has been generated."""


class SessionNotFoundError(StudyPlannerError):
    """Raised when a session is not part of the current schedule."""
