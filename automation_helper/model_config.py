# automation_helper/model_config.py
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

API_KEY_VAR = "OPENAI_API_KEY"
_DEFAULT_MODEL = "gpt-4"
_DEFAULT_BASE_URL = "https://api.openai.com/v1"
_DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True, slots=True)
class AssistantConfig:
    """Settings for the OpenAI chat-completion call used by the `ai` command."""
    api_key: Optional[str]
    model: str = _DEFAULT_MODEL
    base_url: str = _DEFAULT_BASE_URL
    timeout: float = _DEFAULT_TIMEOUT

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


def _read_timeout(raw: Optional[str]) -> float:
    if not raw:
        return _DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"OPENAI_TIMEOUT ('{raw}') is not a number. Using default {_DEFAULT_TIMEOUT}s.")
        return _DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning(f"OPENAI_TIMEOUT ('{raw}') must be positive. Using default {_DEFAULT_TIMEOUT}s.")
        return _DEFAULT_TIMEOUT
    return value


def load_assistant_config(environ: Optional[Mapping[str, str]] = None) -> AssistantConfig:
    """Build the assistant config from the environment (or a given mapping)."""
    env = os.environ if environ is None else environ

    api_key = env.get(API_KEY_VAR) or None
    model = env.get("OPENAI_MODEL") or _DEFAULT_MODEL
    base_url = env.get("OPENAI_BASE_URL") or _DEFAULT_BASE_URL
    timeout = _read_timeout(env.get("OPENAI_TIMEOUT"))

    if not api_key:
        logger.debug(f"Missing environment variable '{API_KEY_VAR}'. The 'ai' command will be unavailable.")

    config = AssistantConfig(api_key=api_key, model=model, base_url=base_url, timeout=timeout)
    logger.info(f"Assistant config loaded. Model: {config.model}, base URL: {config.base_url}, configured: {config.is_configured}")
    return config
