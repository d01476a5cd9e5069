"""Tests for LLM task prioritization and its fallback ordering."""
import json
import typing as t
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from config.settings import Settings
from planner.prioritizer import SYSTEM_PROMPT, TaskPrioritizer, fallback_order
from prompts import load_prompt
from study_scheduler.models import Task


class FakeClient:
    """Stands in for OpenAI: records requests and replays a canned answer."""

    def __init__(self, content: t.Optional[str] = None, error: t.Optional[Exception] = None) -> None:
        self.content = content
        self.error = error
        self.requests: list[dict[str, t.Any]] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs: t.Any) -> SimpleNamespace:
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def tasks() -> list[Task]:
    now = datetime.now()
    return [
        Task(title="Essay", deadline=now + timedelta(days=5), effort=3),
        Task(title="Quiz", deadline=now + timedelta(days=1), effort=1),
        Task(title="Project", deadline=now + timedelta(days=5), effort=8),
    ]


def test_fallback_orders_by_deadline_then_effort(tasks) -> None:
    essay, quiz, project = tasks
    assert fallback_order(tasks) == [quiz, project, essay]


def test_empty_input_gives_empty_list() -> None:
    client = FakeClient(content='{"order": []}')
    prioritizer = TaskPrioritizer(client=client)

    assert prioritizer.prioritize(None) == []
    assert prioritizer.prioritize([]) == []
    assert client.requests == []


def test_without_client_uses_fallback(tasks) -> None:
    essay, quiz, project = tasks
    assert TaskPrioritizer().prioritize(tasks) == [quiz, project, essay]


def test_uses_llm_order(tasks) -> None:
    essay, quiz, project = tasks
    client = FakeClient(content=json.dumps({"order": [3, 1, 2], "rationale": "Big project first."}))

    result = TaskPrioritizer(client=client, model="test-model").prioritize(tasks)

    assert result == [project, essay, quiz]
    assert tasks == [essay, quiz, project]

    request = client.requests[0]
    assert request["model"] == "test-model"
    assert request["response_format"] == {"type": "json_object"}
    assert request["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    payload = json.loads(request["messages"][1]["content"])
    assert [task["title"] for task in payload["tasks"]] == ["Essay", "Quiz", "Project"]
    assert payload["tasks"][0]["number"] == 1
    assert payload["tasks"][2]["effort_hours"] == 8


@pytest.mark.parametrize("content", [
    None,
    "",
    "not json",
    '{"order": [1, 2]}',
    '{"order": [1, 1, 2]}',
    '{"order": [0, 1, 2]}',
    '{"order": "first"}',
])
def test_bad_llm_answer_falls_back(tasks, content) -> None:
    essay, quiz, project = tasks

    result = TaskPrioritizer(client=FakeClient(content=content)).prioritize(tasks)

    assert result == [quiz, project, essay]


def test_llm_error_falls_back(tasks) -> None:
    essay, quiz, project = tasks
    client = FakeClient(error=OpenAIError("boom"))

    assert TaskPrioritizer(client=client).prioritize(tasks) == [quiz, project, essay]
    assert len(client.requests) == 1


def test_from_settings_without_key_has_no_client() -> None:
    prioritizer = TaskPrioritizer.from_settings(Settings(model="some-model"))

    assert prioritizer.client is None
    assert prioritizer.model == "some-model"


def test_from_settings_with_key_builds_client() -> None:
    prioritizer = TaskPrioritizer.from_settings(Settings(openai_api_key="sk-test", base_url="http://localhost:9/v1"))

    assert prioritizer.client is not None
    assert str(prioritizer.client.base_url).startswith("http://localhost:9/v1")


def test_load_prompt(tmp_path) -> None:
    (tmp_path / "greeting.txt").write_text("Hello", encoding="utf-8")

    assert load_prompt("greeting", str(tmp_path)) == "Hello"
    assert "order" in load_prompt("prioritizer_system_prompt")
    with pytest.raises(FileNotFoundError):
        load_prompt("missing", str(tmp_path))
