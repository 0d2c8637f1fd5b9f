"""
automation_helper.assistant
===========================

Thin bridge to an OpenAI chat-completion model for RAPID questions.

Every call is one independent round trip: a fixed system prompt plus the
user's question.  No history, no streaming, no retries.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

import openai
from openai import AsyncOpenAI

from .model_config import API_KEY_VAR, AssistantConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert in ABB RAPID robotics programming language. "
    "Help users understand and modify their RAPID code. Provide clear, "
    "practical explanations and examples."
)

AI_USAGE = 'Usage: ai help "your question about the code"'
MISSING_KEY_MESSAGE = f"Error: {API_KEY_VAR} environment variable not set"


class AssistantError(Exception):
    """Raised when the chat-completion request fails or returns nothing usable."""


class RapidAssistant:
    """Wraps one AsyncOpenAI client configured from an AssistantConfig."""

    def __init__(self, config: AssistantConfig, client: Any = None):
        self.config = config
        if client is None:
            client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                max_retries=0,
            )
        self._client = client

    async def ask(self, question: str) -> str:
        logger.debug(f"Sending question to model '{self.config.model}' ({len(question)} chars)")
        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": question},
                ],
            )
        except openai.OpenAIError as e:
            logger.error(f"Chat completion failed: {e}", exc_info=True)
            raise AssistantError(f"AI request failed: {e}") from e

        if not response.choices:
            raise AssistantError("AI request failed: response contained no choices")
        content = response.choices[0].message.content
        logger.info(f"Received answer from '{self.config.model}'")
        return content or ""

    async def close(self) -> None:
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()


def _extract_question(args: List[str]) -> str:
    """`ai help <words...>` or `ai <words...>` -> the question text."""
    words = args[1:] if args and args[0].lower() == "help" else args
    question = " ".join(words).strip()
    if len(question) >= 2 and question[0] == question[-1] and question[0] in "\"'":
        question = question[1:-1].strip()
    return question


class AIHandler:
    """
    Handler for the `ai` command.

    The assistant is created lazily on the first question so a missing
    credential never touches the network or the OpenAI client.
    """

    def __init__(
        self,
        config: AssistantConfig,
        assistant_factory: Callable[[AssistantConfig], RapidAssistant] = RapidAssistant,
    ):
        self.config = config
        self._factory = assistant_factory
        self._assistant: Optional[RapidAssistant] = None

    async def __call__(self, args: List[str]) -> str:
        question = _extract_question(args)
        if not question:
            return AI_USAGE
        if not self.config.is_configured:
            return MISSING_KEY_MESSAGE

        if self._assistant is None:
            self._assistant = self._factory(self.config)
        try:
            return await self._assistant.ask(question)
        except AssistantError as e:
            return f"Error getting AI help: {e}"

    async def aclose(self) -> None:
        if self._assistant is not None:
            await self._assistant.close()
            self._assistant = None
