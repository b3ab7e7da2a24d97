"""
Search tool exposed to the chat model.

The model decides when to call search_company_documents. The tool runs the
lexical search engine and hands back plain-text excerpts; formatting them
into something the model can cite is this module's job, not the engine's.

TOOL PROTOCOL:
--------------
1. search_tool_definition() is sent with every chat request
2. The model replies with a tool call carrying JSON arguments
3. run_search_tool() validates the arguments and runs the search
4. The returned text goes back to the model as the tool message
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from policy_assistant.core.protocols import DocumentSearcher, SearchResult

logger = logging.getLogger(__name__)

SEARCH_TOOL_NAME = "search_company_documents"

SEARCH_TOOL_DESCRIPTION = (
    "Search the internal company knowledge base (HR, IT and general policies). "
    "Use it for any question about leave, remote work, security, expenses or "
    "workplace conduct. Returns up to two relevant policy excerpts."
)

NO_RESULTS_TEXT = "No relevant internal documents were found for this query."


class SearchDocumentsArgs(BaseModel):
    """Arguments the model passes to the search tool."""

    query: str = Field(
        description="Keywords describing the policy topic, e.g. 'parental leave' or 'wfh security'"
    )


def search_tool_definition() -> dict[str, Any]:
    """OpenAI function-tool schema for the search tool."""
    return {
        "type": "function",
        "function": {
            "name": SEARCH_TOOL_NAME,
            "description": SEARCH_TOOL_DESCRIPTION,
            "parameters": SearchDocumentsArgs.model_json_schema(),
        },
    }


def format_search_results(results: list[SearchResult]) -> str:
    """
    Render search results as context for the model.

    Each excerpt is headed by its title so the model can cite it.
    An empty list becomes NO_RESULTS_TEXT.
    """
    if not results:
        return NO_RESULTS_TEXT

    sections = [
        f"[{i}] {result.title}\n{result.content}"
        for i, result in enumerate(results, start=1)
    ]
    return "Relevant internal documents:\n\n" + "\n\n".join(sections)


def run_search_tool(searcher: DocumentSearcher, arguments: str) -> str:
    """
    Execute a search tool call.

    Args:
        searcher: Search engine to query
        arguments: Raw JSON arguments string from the model

    Returns:
        Text for the tool message. Malformed arguments produce an error
        text the model can react to, not an exception.
    """
    try:
        args = SearchDocumentsArgs.model_validate_json(arguments or "{}")
    except ValidationError as e:
        logger.warning(f"Invalid {SEARCH_TOOL_NAME} arguments: {arguments!r}")
        return f"Error: invalid arguments for {SEARCH_TOOL_NAME}: {e.errors()[0]['msg']}"

    return format_search_results(searcher.search(args.query))
