"""
Agent module - the chat layer that consumes the search engine as a tool.

USAGE:
------
from policy_assistant.agent import create_session, Persona

session = create_session(persona=Persona.CONCISE)
reply = session.send_message("How many weeks of parental leave do we get?")

formal = session.with_persona("formal")  # new session, empty history
"""

from policy_assistant.agent.config import AssistantConfig, DEFAULT_MODEL
from policy_assistant.agent.personas import (
    DEFAULT_PERSONA,
    INITIAL_GREETING,
    Persona,
    system_instruction,
)
from policy_assistant.agent.tools import (
    NO_RESULTS_TEXT,
    SEARCH_TOOL_NAME,
    SearchDocumentsArgs,
    format_search_results,
    run_search_tool,
    search_tool_definition,
)
from policy_assistant.agent.session import (
    ChatError,
    ChatReply,
    ChatSession,
    create_session,
)

__all__ = [
    # Config
    "AssistantConfig",
    "DEFAULT_MODEL",
    # Personas
    "Persona",
    "DEFAULT_PERSONA",
    "INITIAL_GREETING",
    "system_instruction",
    # Tools
    "SEARCH_TOOL_NAME",
    "NO_RESULTS_TEXT",
    "SearchDocumentsArgs",
    "search_tool_definition",
    "format_search_results",
    "run_search_tool",
    # Session
    "ChatSession",
    "ChatReply",
    "ChatError",
    "create_session",
]
