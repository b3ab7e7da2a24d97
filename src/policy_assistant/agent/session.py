"""
Chat session - one conversation with the assistant.

A ChatSession owns its persona, its history and its model client. Nothing
is shared at module level: two sessions never see each other's history, and
switching persona returns a NEW session instead of mutating this one.

TURN FLOW:
----------
1. Build messages: system prompt + history + new user message
2. Call the chat model with the search tool attached
3. If the model calls the tool, run the search and send the excerpts back
4. Repeat until the model answers in text (bounded by max_tool_rounds)
5. On success append the user message and the answer to history

Failures come back as ChatError values, the way AgentError works in the
evaluation harness, so the UI layer can show them without try/except.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from openai import OpenAI, OpenAIError

from policy_assistant.agent.config import AssistantConfig
from policy_assistant.agent.personas import DEFAULT_PERSONA, Persona, system_instruction
from policy_assistant.agent.tools import SEARCH_TOOL_NAME, run_search_tool, search_tool_definition
from policy_assistant.core.protocols import DocumentSearcher
from policy_assistant.observability.attributes import (
    ASSISTANT_TOOL_CALLS,
    GEN_AI_USAGE_INPUT_TOKENS,
    GEN_AI_USAGE_OUTPUT_TOKENS,
    assistant_turn_attributes,
)
from policy_assistant.observability.tracer import get_tracer

logger = logging.getLogger(__name__)


@dataclass
class ChatReply:
    """Successful assistant turn, with metrics."""
    text: str
    model: str
    latency_ms: float
    input_tokens: int = 0
    output_tokens: int = 0
    searches: list[str] = field(default_factory=list)  # raw tool arguments

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass
class ChatError:
    """Error result when a turn fails."""
    error_type: str
    error_message: str

    @property
    def display_text(self) -> str:
        """Message suitable for the transcript."""
        return f"Error: An error occurred while communicating with the AI. {self.error_message}"


class ChatSession:
    """
    A single conversation bound to one persona.

    Dependencies are INJECTED: tests pass a MagicMock client and an
    in-memory search engine.
    """

    def __init__(
        self,
        config: AssistantConfig,
        client: OpenAI,
        searcher: DocumentSearcher,
        persona: Persona = DEFAULT_PERSONA,
        history: list[dict[str, str]] | None = None,
        on_search: Callable[[], None] | None = None,
    ):
        self.config = config
        self.persona = Persona(persona)
        self._client = client
        self._searcher = searcher
        self._history: list[dict[str, str]] = list(history or [])
        self._on_search = on_search

    @property
    def history(self) -> list[dict[str, str]]:
        """Copy of the user/assistant messages exchanged so far."""
        return list(self._history)

    def with_persona(self, persona: Persona | str) -> ChatSession:
        """Start a fresh conversation with another persona. self is unchanged."""
        logger.info(f"Starting new chat session for persona: {Persona(persona).value}")
        return ChatSession(
            config=self.config,
            client=self._client,
            searcher=self._searcher,
            persona=Persona(persona),
            on_search=self._on_search,
        )

    def clear(self) -> ChatSession:
        """Start a fresh conversation with the same persona."""
        return self.with_persona(self.persona)

    def _build_messages(self, text: str) -> list[dict[str, Any]]:
        return [
            {"role": "system", "content": system_instruction(self.persona)},
            *self._history,
            {"role": "user", "content": text},
        ]

    def _execute_tool_call(self, tool_call: Any) -> str:
        name = tool_call.function.name
        if name != SEARCH_TOOL_NAME:
            logger.warning(f"Model requested unknown tool: {name}")
            return f"Error: unknown tool '{name}'"

        if self._on_search is not None:
            self._on_search()
        return run_search_tool(self._searcher, tool_call.function.arguments)

    def send_message(self, text: str) -> ChatReply | ChatError:
        """
        Run one assistant turn.

        Args:
            text: The user's message

        Returns:
            ChatReply on success, ChatError on failure. History is only
            extended on success.
        """
        messages = self._build_messages(text)
        searches: list[str] = []
        input_tokens = 0
        output_tokens = 0

        tracer = get_tracer()
        with tracer.start_span(
            "chat_turn",
            attributes=assistant_turn_attributes(
                persona=self.persona.value,
                model=self.config.model,
                history_length=len(self._history),
            ),
        ) as span:
            start_time = time.time()
            try:
                for round_index in range(self.config.max_tool_rounds + 1):
                    tools_allowed = round_index < self.config.max_tool_rounds
                    response = self._client.chat.completions.create(
                        model=self.config.model,
                        messages=messages,
                        temperature=self.config.temperature,
                        tools=[search_tool_definition()],
                        tool_choice="auto" if tools_allowed else "none",
                    )
                    if response.usage is not None:
                        input_tokens += response.usage.prompt_tokens
                        output_tokens += response.usage.completion_tokens

                    if not response.choices:
                        logger.error("Chat model returned no choices")
                        span.fail("no choices in response")
                        return ChatError(
                            error_type="EmptyResponse",
                            error_message="Model returned no choices",
                        )

                    message = response.choices[0].message
                    if not message.tool_calls or not tools_allowed:
                        break

                    messages.append({
                        "role": "assistant",
                        "content": message.content,
                        "tool_calls": [
                            {
                                "id": call.id,
                                "type": "function",
                                "function": {
                                    "name": call.function.name,
                                    "arguments": call.function.arguments,
                                },
                            }
                            for call in message.tool_calls
                        ],
                    })
                    for call in message.tool_calls:
                        searches.append(call.function.arguments)
                        messages.append({
                            "role": "tool",
                            "tool_call_id": call.id,
                            "content": self._execute_tool_call(call),
                        })

            except OpenAIError as e:
                logger.error(f"Error calling chat model: {e}")
                span.fail(str(e), exception=e)
                return ChatError(error_type=type(e).__name__, error_message=str(e))

            latency_ms = (time.time() - start_time) * 1000
            span.set_attributes({
                ASSISTANT_TOOL_CALLS: len(searches),
                GEN_AI_USAGE_INPUT_TOKENS: input_tokens,
                GEN_AI_USAGE_OUTPUT_TOKENS: output_tokens,
            })

            if not message.content:
                span.fail("empty response")
                return ChatError(
                    error_type="EmptyResponse",
                    error_message="Model returned no text",
                )

        self._history.append({"role": "user", "content": text})
        self._history.append({"role": "assistant", "content": message.content})

        return ChatReply(
            text=message.content,
            model=self.config.model,
            latency_ms=latency_ms,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            searches=searches,
        )


def create_session(
    config: AssistantConfig | None = None,
    persona: Persona | str = DEFAULT_PERSONA,
    searcher: DocumentSearcher | None = None,
    client: OpenAI | None = None,
    on_search: Callable[[], None] | None = None,
) -> ChatSession:
    """
    Factory that validates configuration and wires a session.

    Raises:
        ConfigurationError: the API key (or another setting) is missing.
            Raised here, at startup, never in the middle of a turn.
    """
    config = config or AssistantConfig.from_env()
    config.validate()

    if searcher is None:
        from policy_assistant.retrieval import get_search_engine

        searcher = get_search_engine()

    client = client or OpenAI(api_key=config.api_key)
    return ChatSession(
        config=config,
        client=client,
        searcher=searcher,
        persona=Persona(persona),
        on_search=on_search,
    )
