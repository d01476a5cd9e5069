"""LLM-based task prioritization with a deterministic fallback.

The prioritizer asks an OpenAI-compatible chat completion endpoint to order the
student's tasks. Whenever that is not possible (no API key, a failed request,
or an answer that is not a valid ordering) the tasks are ordered by earliest
deadline first, larger effort first on ties. The scheduling engine consumes the
resulting order as-is.
"""
from __future__ import annotations

import json
import logging
import typing as t

from openai import OpenAI, OpenAIError

from config.settings import DEFAULT_MODEL, Settings
from planner.models import PrioritizedTaskInput, PriorityOrder
from prompts import load_prompt
from study_scheduler.models import Task

logger = logging.getLogger(__name__)

# Load system prompt from file
SYSTEM_PROMPT = load_prompt("prioritizer_system_prompt")


def fallback_order(tasks: t.Iterable[Task]) -> list[Task]:
    """Order tasks by earliest deadline, breaking ties by larger effort first."""
    return sorted(tasks, key=lambda task: (task.deadline, -task.effort))


class TaskPrioritizer:
    """Orders tasks by urgency and importance using an LLM."""

    def __init__(self, client: t.Optional[OpenAI] = None, model: str = DEFAULT_MODEL) -> None:
        """
        Args:
            client: OpenAI client, or None to always use the fallback ordering.
            model: Chat completion model to ask.
        """
        self.client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> TaskPrioritizer:
        client = None
        if settings.openai_api_key:
            client = OpenAI(api_key=settings.openai_api_key, base_url=settings.base_url)
        return cls(client=client, model=settings.model)

    def prioritize(self, tasks: t.Optional[t.Sequence[Task]]) -> list[Task]:
        """Return a new list with the tasks in priority order, highest first.

        Args:
            tasks: Tasks to order. None or empty gives an empty list.

        Returns:
            The same tasks, reordered.
        """
        tasks = list(tasks or [])
        if not tasks:
            return []

        if self.client is None:
            logger.info("No LLM client configured; ordering %d tasks by deadline", len(tasks))
            return fallback_order(tasks)

        try:
            order = self._request_order(tasks)
        except (OpenAIError, ValueError) as e:
            logger.warning("LLM prioritization failed, ordering tasks by deadline instead: %s", e)
            return fallback_order(tasks)

        return [tasks[number - 1] for number in order]

    def _request_order(self, tasks: list[Task]) -> list[int]:
        """Ask the LLM for an ordering and validate it.

        Raises:
            ValueError: If the response is empty, not valid JSON for PriorityOrder,
                or not a permutation of the task numbers.
            OpenAIError: If the request itself fails.
        """
        payload = {
            "tasks": [
                PrioritizedTaskInput(
                    number=number,
                    title=task.title,
                    deadline=task.deadline.isoformat(timespec="minutes"),
                    effort_hours=task.effort,
                ).model_dump()
                for number, task in enumerate(tasks, 1)
            ]
        }

        completion = self.client.chat.completions.create(
            model=self.model,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": json.dumps(payload, indent=2)},
            ],
        )

        response_content = completion.choices[0].message.content
        if not response_content:
            raise ValueError("Empty response from LLM")

        # pydantic's ValidationError is a ValueError
        result = PriorityOrder.model_validate_json(response_content)
        if sorted(result.order) != list(range(1, len(tasks) + 1)):
            raise ValueError(f"LLM order {result.order} is not a permutation of 1..{len(tasks)}")

        if result.rationale:
            logger.info("LLM prioritization rationale: %s", result.rationale)
        return result.order
