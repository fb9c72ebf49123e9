"""Shared fixtures: fake InquirerPy prompts that record how they were built."""

from __future__ import annotations

from typing import Any

import pytest
from InquirerPy import inquirer

PROMPT_FACTORIES = ("text", "secret", "confirm", "select", "checkbox")


class FakePrompt:
    def __init__(self, answer: Any):
        self.answer = answer

    def execute(self) -> Any:
        if isinstance(self.answer, BaseException):
            raise self.answer
        return self.answer


class PromptRecorder:
    """Stands in for the InquirerPy prompt factories.

    Queue answers with ``answer(factory, value)``; every call is recorded as
    ``(factory, kwargs)`` in ``calls``. A queued exception is raised from
    ``execute()``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._answers: dict[str, list[Any]] = {}

    def answer(self, factory: str, value: Any) -> None:
        self._answers.setdefault(factory, []).append(value)

    def factory(self, name: str):
        def build(**kwargs: Any) -> FakePrompt:
            self.calls.append((name, kwargs))
            queued = self._answers.get(name)
            if not queued:
                raise AssertionError(f"no answer queued for inquirer.{name}")
            return FakePrompt(queued.pop(0))

        return build

    @property
    def last(self) -> tuple[str, dict[str, Any]]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def _no_theme_env(monkeypatch):
    monkeypatch.delenv("ASKER_THEME", raising=False)


@pytest.fixture
def prompts(monkeypatch) -> PromptRecorder:
    recorder = PromptRecorder()
    for name in PROMPT_FACTORIES:
        monkeypatch.setattr(inquirer, name, recorder.factory(name))
    return recorder
