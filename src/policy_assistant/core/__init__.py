"""
Core module - shared protocols, types and errors.

USAGE:
------
from policy_assistant.core import DocumentSearcher, SearchResult

class MySearcher:
    '''Implements DocumentSearcher protocol.'''
    ...
"""

from policy_assistant.core.errors import (
    PolicyAssistantError,
    CorpusError,
    ConfigurationError,
)
from policy_assistant.core.protocols import (
    # Protocols
    DocumentSearcher,
    DocumentStore,
    # Data classes
    SearchResult,
)

__all__ = [
    # Protocols
    "DocumentSearcher",
    "DocumentStore",
    # Data classes
    "SearchResult",
    # Errors
    "PolicyAssistantError",
    "CorpusError",
    "ConfigurationError",
]
