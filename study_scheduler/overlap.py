"""Conflict detection between placed sessions."""
from __future__ import annotations

from study_scheduler.models import Schedule, Session


def sessions_conflict(candidate: Session, existing: Session) -> bool:
    """Whether two sessions clash.

    Sessions on different dates never clash. On the same date they clash unless
    one ends strictly before the other starts: touching endpoints count as a
    clash, so back-to-back sessions are not allowed.
    """
    if candidate.date != existing.date:
        return False
    return candidate.start <= existing.end and existing.start <= candidate.end


def find_overlap(candidate: Session, schedule: Schedule) -> bool:
    """Whether ``candidate`` clashes with any session already in ``schedule``."""
    return any(sessions_conflict(candidate, existing) for existing in schedule.sessions)
