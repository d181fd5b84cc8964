"""Shared test fixtures for colorside tests."""

import io
from typing import Any

import pytest

from colorside.console import ConsoleModule
from colorside.engine import PromptRequest
from colorside.prompts import InputModule
from colorside.session import InterruptGuard
from colorside.side import ColorSide


class RecordingEngine:
    """Prompt engine that records requests and replays canned answers."""

    def __init__(self) -> None:
        self.requests: list[PromptRequest] = []
        self.answers: list[Any] = []

    def ask(self, request: PromptRequest) -> Any:
        self.requests.append(request)
        answer = self.answers.pop(0) if self.answers else None
        return request.finish(answer)

    @property
    def last(self) -> PromptRequest:
        return self.requests[-1]


@pytest.fixture
def engine():
    """Recording prompt engine."""
    return RecordingEngine()


@pytest.fixture
def stream():
    """In-memory stream receiving reset codes."""
    return io.StringIO()


@pytest.fixture
def guard(stream):
    """Interrupt guard that never touches the real SIGINT handler."""
    guard = InterruptGuard(stream)
    guard.install = lambda: None
    guard.uninstall = lambda: None
    return guard


@pytest.fixture
def make_input(engine, guard, stream):
    """Factory for activated input modules in a given locale."""

    def _make(lang: str = "en", *, console: ConsoleModule | None = None) -> InputModule:
        module = InputModule(lang, console=console, engine=engine, guard=guard, stream=stream)
        return module.activate()

    return _make


@pytest.fixture
def side(engine, guard):
    """ColorSide instance with the recording engine and an inert interrupt guard."""
    side = ColorSide("en", engine=engine)
    side.input._guard = guard
    return side
