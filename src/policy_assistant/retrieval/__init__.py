"""
Retrieval module - lexical search over the policy knowledge base.

This module provides:
- Document / DocumentCategory: The document model
- levenshtein(): Edit distance used for typo-tolerant matching
- expand_query(): Synonym-driven query expansion
- score_document(): Weighted title/content scoring
- DocumentSearchEngine: Ranking and truncation
- StaticDocumentStore: Validated in-memory corpus
- get_search_engine() / search_documents(): Factory and convenience entry

ARCHITECTURE:
-------------
1. Protocol defines the contract (DocumentSearcher in core.protocols)
2. DocumentSearchEngine implements it
3. Factory function for instantiation over the seed corpus
"""

from policy_assistant.retrieval.document import Document, DocumentCategory
from policy_assistant.retrieval.matcher import levenshtein
from policy_assistant.retrieval.expansion import (
    DEFAULT_SYNONYMS,
    SynonymMap,
    expand_query,
    tokenize_query,
)
from policy_assistant.retrieval.scoring import (
    ScoringWeights,
    clean_token,
    match_threshold,
    score_document,
    tokenize,
)
from policy_assistant.retrieval.store import StaticDocumentStore
from policy_assistant.retrieval.engine import (
    DocumentSearchEngine,
    ScoredDocument,
    get_search_engine,
    reset_search_engine,
    search_documents,
)
from policy_assistant.retrieval.seeds import get_policy_documents, get_policy_store

__all__ = [
    # Document
    "Document",
    "DocumentCategory",
    # Matcher
    "levenshtein",
    # Expansion
    "DEFAULT_SYNONYMS",
    "SynonymMap",
    "expand_query",
    "tokenize_query",
    # Scoring
    "ScoringWeights",
    "clean_token",
    "match_threshold",
    "score_document",
    "tokenize",
    # Store
    "StaticDocumentStore",
    # Engine
    "DocumentSearchEngine",
    "ScoredDocument",
    "get_search_engine",
    "reset_search_engine",
    "search_documents",
    # Seeds
    "get_policy_documents",
    "get_policy_store",
]
