"""
Study scheduling engine.

Decomposes study tasks into bounded sessions and places them into a weekly
availability calendar without overlaps.
"""
from study_scheduler.decomposition import MAX_SESSION_HOURS, session_durations, split_into_sessions
from study_scheduler.exceptions import (InvalidAvailabilityError, InvalidTaskError, OverlappingAvailabilityError,
                                        ScheduleNotFoundError, SessionNotFoundError, StudyPlannerError)
from study_scheduler.models import Availability, Course, Schedule, Session, SessionPlaceholder, Task, Weekday
from study_scheduler.overlap import find_overlap, sessions_conflict
from study_scheduler.scheduler import Scheduler
from study_scheduler.strategies import (STRATEGIES, BalancedStrategy, PriorityStrategy, SchedulerStrategy,
                                        TimeBlockStrategy, current_week_monday, get_strategy)
