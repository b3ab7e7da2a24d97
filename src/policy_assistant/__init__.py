"""
policy-assistant - enterprise chat assistant grounded in company policies.

The core is a lexical document search engine (synonym expansion, fuzzy
matching, weighted scoring) that the chat model calls as a tool.
"""

from policy_assistant.core import SearchResult
from policy_assistant.retrieval import search_documents

__version__ = "0.1.0"

__all__ = ["SearchResult", "search_documents", "__version__"]
