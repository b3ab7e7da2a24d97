"""
Semantic Conventions for Span Attributes

Attribute keys following OpenTelemetry GenAI conventions plus custom
namespaces for search and assistant metrics.

Reference: https://opentelemetry.io/docs/specs/semconv/gen-ai/
"""

# ---------------------------------------------------------------------------
# GENAI NAMESPACE (OTel standard)
# ---------------------------------------------------------------------------

GEN_AI_SYSTEM = "gen_ai.system"  # "openai"
GEN_AI_REQUEST_MODEL = "gen_ai.request.model"  # "gpt-4o-mini"

GEN_AI_USAGE_INPUT_TOKENS = "gen_ai.usage.input_tokens"
GEN_AI_USAGE_OUTPUT_TOKENS = "gen_ai.usage.output_tokens"


# ---------------------------------------------------------------------------
# SEARCH NAMESPACE (custom)
# ---------------------------------------------------------------------------

SEARCH_QUERY = "search.query"  # only when PHOENIX_CAPTURE_QUERIES=true
SEARCH_QUERY_LENGTH = "search.query.length"
SEARCH_EXPANDED_TERM_COUNT = "search.expanded_term_count"
SEARCH_CANDIDATE_COUNT = "search.candidate_count"  # docs with score > 0
SEARCH_RESULT_COUNT = "search.result_count"
SEARCH_RESULT_TITLES = "search.result_titles"
SEARCH_TOP_SCORE = "search.top_score"


# ---------------------------------------------------------------------------
# ASSISTANT NAMESPACE (custom)
# ---------------------------------------------------------------------------

ASSISTANT_PERSONA = "assistant.persona"  # "friendly", "formal", "concise"
ASSISTANT_TOOL_CALLS = "assistant.tool_calls"
ASSISTANT_HISTORY_LENGTH = "assistant.history_length"


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------


def search_request_attributes(
    query: str,
    expanded_term_count: int,
    capture_query: bool = False,
) -> dict:
    """Create attributes dict for a search span at request time."""
    attrs = {
        SEARCH_QUERY_LENGTH: len(query),
        SEARCH_EXPANDED_TERM_COUNT: expanded_term_count,
    }
    if capture_query:
        attrs[SEARCH_QUERY] = query
    return attrs


def search_outcome_attributes(
    candidate_count: int,
    result_titles: list[str],
    top_score: int | None = None,
) -> dict:
    """Create attributes dict describing what a search returned."""
    attrs = {
        SEARCH_CANDIDATE_COUNT: candidate_count,
        SEARCH_RESULT_COUNT: len(result_titles),
        SEARCH_RESULT_TITLES: list(result_titles),
    }
    if top_score is not None:
        attrs[SEARCH_TOP_SCORE] = top_score
    return attrs


def assistant_turn_attributes(
    persona: str,
    model: str,
    history_length: int,
) -> dict:
    """Create attributes dict for one chat turn span."""
    return {
        ASSISTANT_PERSONA: persona,
        GEN_AI_SYSTEM: "openai",
        GEN_AI_REQUEST_MODEL: model,
        ASSISTANT_HISTORY_LENGTH: history_length,
    }
