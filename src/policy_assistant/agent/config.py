"""
Assistant configuration.

Credentials are passed in explicitly instead of being read from the
environment at call time. A missing API key fails validate(), which
create_session() calls before the first request is ever made.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from policy_assistant.core.errors import ConfigurationError

DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class AssistantConfig:
    """Configuration for the chat assistant.

    Environment Variables:
        OPENAI_API_KEY: API key for the model provider (required)
        ASSISTANT_MODEL: Chat model name (default: gpt-4o-mini)
        ASSISTANT_TEMPERATURE: Sampling temperature (default: 0.3)
        ASSISTANT_MAX_TOOL_ROUNDS: Tool calls allowed per turn (default: 3)
    """

    api_key: str | None
    model: str = DEFAULT_MODEL
    temperature: float = 0.3
    max_tool_rounds: int = 3

    @classmethod
    def from_env(cls) -> "AssistantConfig":
        """Load config from environment variables."""
        try:
            temperature = float(os.environ.get("ASSISTANT_TEMPERATURE", "0.3"))
            max_tool_rounds = int(os.environ.get("ASSISTANT_MAX_TOOL_ROUNDS", "3"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid assistant setting: {e}") from e

        return cls(
            api_key=os.environ.get("OPENAI_API_KEY") or None,
            model=os.environ.get("ASSISTANT_MODEL", DEFAULT_MODEL),
            temperature=temperature,
            max_tool_rounds=max_tool_rounds,
        )

    def validate(self) -> None:
        """Raise ConfigurationError if the config cannot be used."""
        if not self.api_key:
            raise ConfigurationError("OPENAI_API_KEY environment variable not set")
        if not self.model:
            raise ConfigurationError("Assistant model name is empty")
        if self.max_tool_rounds < 1:
            raise ConfigurationError("max_tool_rounds must be at least 1")
