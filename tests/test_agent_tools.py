"""
Unit Tests for the Search Tool, Personas and Assistant Config

No model calls: the tool is exercised directly with the seed engine.
"""

from unittest.mock import MagicMock, patch

import pytest

from policy_assistant.agent.config import AssistantConfig
from policy_assistant.agent.personas import (
    Persona,
    system_instruction,
)
from policy_assistant.agent.session import create_session
from policy_assistant.agent.tools import (
    NO_RESULTS_TEXT,
    SEARCH_TOOL_NAME,
    format_search_results,
    run_search_tool,
    search_tool_definition,
)
from policy_assistant.core import ConfigurationError, SearchResult
from policy_assistant.retrieval import DocumentSearchEngine, get_policy_store


@pytest.fixture
def engine():
    return DocumentSearchEngine(get_policy_store())


# ---------------------------------------------------------------------------
# TOOL DEFINITION
# ---------------------------------------------------------------------------


class TestToolDefinition:

    def test_function_name(self):
        definition = search_tool_definition()

        assert definition["type"] == "function"
        assert definition["function"]["name"] == SEARCH_TOOL_NAME

    def test_query_parameter_required(self):
        parameters = search_tool_definition()["function"]["parameters"]

        assert "query" in parameters["properties"]
        assert parameters["required"] == ["query"]


# ---------------------------------------------------------------------------
# FORMATTING
# ---------------------------------------------------------------------------


class TestFormatSearchResults:

    def test_empty_results(self):
        assert format_search_results([]) == NO_RESULTS_TEXT

    def test_numbered_with_titles(self):
        text = format_search_results([
            SearchResult(title="Code of Conduct", content="Be respectful."),
            SearchResult(title="Parental Leave Policy", content="16 weeks."),
        ])

        assert "[1] Code of Conduct\nBe respectful." in text
        assert "[2] Parental Leave Policy\n16 weeks." in text


# ---------------------------------------------------------------------------
# RUN TOOL
# ---------------------------------------------------------------------------


class TestRunSearchTool:

    def test_returns_matching_excerpt(self, engine):
        text = run_search_tool(engine, '{"query": "parental leave"}')

        assert "Parental Leave Policy" in text
        assert "16 weeks" in text

    def test_no_match_reports_no_documents(self, engine):
        assert run_search_tool(engine, '{"query": "to is"}') == NO_RESULTS_TEXT

    @pytest.mark.parametrize("arguments", ["", "{}", '{"q": "leave"}', "not json"])
    def test_bad_arguments_return_error_text(self, engine, arguments):
        text = run_search_tool(engine, arguments)

        assert text.startswith("Error: invalid arguments")

    def test_passes_query_to_searcher(self):
        searcher = MagicMock()
        searcher.search.return_value = []

        run_search_tool(searcher, '{"query": "wfh"}')

        searcher.search.assert_called_once_with("wfh")


# ---------------------------------------------------------------------------
# PERSONAS
# ---------------------------------------------------------------------------


class TestPersonas:

    @pytest.mark.parametrize("persona,phrase", [
        (Persona.FRIENDLY, "friendly"),
        (Persona.FORMAL, "formal"),
        (Persona.CONCISE, "brief"),
    ])
    def test_persona_prompt(self, persona, phrase):
        assert phrase in system_instruction(persona)

    def test_accepts_plain_string(self):
        assert system_instruction("formal") == system_instruction(Persona.FORMAL)

    def test_unknown_persona_falls_back_to_friendly(self):
        assert system_instruction("pirate") == system_instruction(Persona.FRIENDLY)

    def test_every_prompt_mentions_search_tool(self):
        for persona in Persona:
            assert SEARCH_TOOL_NAME in system_instruction(persona)


# ---------------------------------------------------------------------------
# CONFIG
# ---------------------------------------------------------------------------


class TestAssistantConfig:

    def test_from_env_defaults(self):
        with patch.dict("os.environ", {"OPENAI_API_KEY": "sk-test"}, clear=True):
            config = AssistantConfig.from_env()

        assert config.api_key == "sk-test"
        assert config.model == "gpt-4o-mini"
        assert config.max_tool_rounds == 3

    def test_from_env_overrides(self):
        env = {
            "OPENAI_API_KEY": "sk-test",
            "ASSISTANT_MODEL": "gpt-4o",
            "ASSISTANT_TEMPERATURE": "0.0",
            "ASSISTANT_MAX_TOOL_ROUNDS": "1",
        }
        with patch.dict("os.environ", env, clear=True):
            config = AssistantConfig.from_env()

        assert config.model == "gpt-4o"
        assert config.temperature == 0.0
        assert config.max_tool_rounds == 1

    def test_invalid_number_raises_configuration_error(self):
        with patch.dict("os.environ", {"ASSISTANT_TEMPERATURE": "warm"}, clear=True):
            with pytest.raises(ConfigurationError):
                AssistantConfig.from_env()

    def test_missing_key_fails_validation(self):
        with patch.dict("os.environ", {}, clear=True):
            config = AssistantConfig.from_env()

        assert config.api_key is None
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            config.validate()

    def test_zero_tool_rounds_fails_validation(self):
        with pytest.raises(ConfigurationError):
            AssistantConfig(api_key="sk-test", max_tool_rounds=0).validate()

    def test_create_session_fails_at_startup_without_key(self):
        with patch("policy_assistant.agent.session.OpenAI") as mock_openai:
            with pytest.raises(ConfigurationError):
                create_session(config=AssistantConfig(api_key=None))

            mock_openai.assert_not_called()
