"""Shared fixtures: scripted stdin for the REPL and a fake OpenAI client."""

from types import SimpleNamespace

import pytest


class FakeCompletions:
    def __init__(self, reply=None, error=None, choices=None):
        self.reply = reply
        self.error = error
        self.choices = choices
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


class FakeClient:
    """Stands in for AsyncOpenAI: exposes chat.completions.create and close."""

    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self):
        self.closed = True


class ScriptedInput:
    """Async line reader fed from a list; raises EOFError when exhausted."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.prompts = []

    async def __call__(self, prompt_text):
        self.prompts.append(prompt_text)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError


@pytest.fixture
def fake_client_factory():
    return FakeClient


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture(autouse=True)
def _no_openai_key(monkeypatch):
    """Tests never see a real credential from the developer's shell."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
