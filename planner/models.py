"""
Pydantic models for the task prioritizer's LLM exchange.

The prioritizer sends numbered tasks and expects back a JSON object with the
task numbers in priority order.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class PrioritizedTaskInput(BaseModel):
    """One task as presented to the LLM."""
    number: int
    title: str
    deadline: str  # ISO datetime
    effort_hours: int


class PriorityOrder(BaseModel):
    """The LLM's answer: 1-based task numbers, highest priority first."""
    order: list[int] = Field(default_factory=list)
    rationale: str = ""
