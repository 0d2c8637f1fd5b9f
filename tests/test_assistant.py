"""
Tests for the AI bridge: request shape, error wrapping and the `ai` handler.
No network: the OpenAI client is replaced by a scripted fake.
"""

import asyncio

import openai
import pytest
from openai import AsyncOpenAI

from automation_helper.assistant import (
    AI_USAGE,
    MISSING_KEY_MESSAGE,
    SYSTEM_PROMPT,
    AIHandler,
    AssistantError,
    RapidAssistant,
)
from automation_helper.model_config import AssistantConfig

CONFIGURED = AssistantConfig(api_key="sk-test", model="gpt-4")


class TestRapidAssistant:
    def test_sends_system_prompt_and_question(self, fake_client_factory):
        client = fake_client_factory(reply="Use MoveL for straight lines")
        assistant = RapidAssistant(CONFIGURED, client=client)

        answer = asyncio.run(assistant.ask("How do I move in a line?"))

        assert answer == "Use MoveL for straight lines"
        assert len(client.completions.calls) == 1
        call = client.completions.calls[0]
        assert call["model"] == "gpt-4"
        assert call["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "How do I move in a line?"},
        ]

    def test_api_error_is_wrapped(self, fake_client_factory):
        client = fake_client_factory(error=openai.OpenAIError("connection reset"))
        assistant = RapidAssistant(CONFIGURED, client=client)

        with pytest.raises(AssistantError, match="AI request failed: connection reset") as exc_info:
            asyncio.run(assistant.ask("anything"))
        assert isinstance(exc_info.value.__cause__, openai.OpenAIError)

    def test_empty_choices_is_an_error(self, fake_client_factory):
        client = fake_client_factory(choices=[])
        assistant = RapidAssistant(CONFIGURED, client=client)
        with pytest.raises(AssistantError, match="no choices"):
            asyncio.run(assistant.ask("anything"))

    def test_default_client_has_no_retries(self):
        config = AssistantConfig(api_key="sk-test", timeout=5.0)
        assistant = RapidAssistant(config)
        assert isinstance(assistant._client, AsyncOpenAI)
        assert assistant._client.max_retries == 0
        asyncio.run(assistant.close())

    def test_close_closes_client(self, fake_client_factory):
        client = fake_client_factory(reply="x")
        asyncio.run(RapidAssistant(CONFIGURED, client=client).close())
        assert client.closed


class TestAIHandler:
    @pytest.fixture
    def scripted(self, fake_client_factory):
        """Handler whose assistant answers with a fixed reply; exposes the fake client."""
        client = fake_client_factory(reply="Use MoveL for straight lines")
        handler = AIHandler(CONFIGURED, assistant_factory=lambda cfg: RapidAssistant(cfg, client=client))
        return handler, client

    def test_returns_response_unmodified(self, scripted):
        handler, client = scripted
        out = asyncio.run(handler(["help", "how", "do", "I", "move", "straight?"]))
        assert out == "Use MoveL for straight lines"
        assert client.completions.calls[0]["messages"][1]["content"] == "how do I move straight?"

    def test_question_without_help_keyword(self, scripted):
        handler, client = scripted
        asyncio.run(handler(["what", "is", "a", "zone?"]))
        assert client.completions.calls[0]["messages"][1]["content"] == "what is a zone?"

    def test_surrounding_quotes_are_stripped(self, scripted):
        handler, client = scripted
        asyncio.run(handler(["help", '"what', "is", 'TCP?"']))
        assert client.completions.calls[0]["messages"][1]["content"] == "what is TCP?"

    @pytest.mark.parametrize("args", [[], ["help"]])
    def test_usage_without_question(self, scripted, args):
        handler, client = scripted
        assert asyncio.run(handler(args)) == AI_USAGE
        assert client.completions.calls == []

    def test_missing_credential_makes_no_call(self):
        def factory(cfg):
            raise AssertionError("assistant must not be created without a credential")

        handler = AIHandler(AssistantConfig(api_key=""), assistant_factory=factory)
        assert asyncio.run(handler(["help", "anything"])) == MISSING_KEY_MESSAGE

    def test_transport_error_becomes_output(self, fake_client_factory):
        client = fake_client_factory(error=openai.OpenAIError("timed out"))
        handler = AIHandler(CONFIGURED, assistant_factory=lambda cfg: RapidAssistant(cfg, client=client))
        out = asyncio.run(handler(["help", "hello"]))
        assert out == "Error getting AI help: AI request failed: timed out"

    def test_assistant_is_created_once(self, fake_client_factory):
        created = []

        def factory(cfg):
            created.append(cfg)
            return RapidAssistant(cfg, client=fake_client_factory(reply="ok"))

        handler = AIHandler(CONFIGURED, assistant_factory=factory)

        async def two_questions():
            await handler(["one"])
            await handler(["two"])
            await handler.aclose()

        asyncio.run(two_questions())
        assert len(created) == 1
