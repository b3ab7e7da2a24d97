"""
Document search engine - expand, score, rank, truncate.

Pipeline for one query:
1. expand_query: lowercase, split, drop short tokens, add synonym groups
2. score_document: fuzzy-match every term against every document
3. drop documents scoring 0, sort by score descending
4. keep the top max_results, strip id and score

Ties keep corpus order (Python's sort is stable), so the same query
against the same corpus always returns the same list.

search() never mutates the engine. The corpus, synonym table and weights
are fixed at construction, which makes search() safe to call from any
number of threads at once.

SCALING NOTE:
-------------
Every call scans every token of every document. That is fine for a
handful of policies; a large corpus would need a precomputed inverted
index instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from policy_assistant.core.errors import ConfigurationError
from policy_assistant.core.protocols import SearchResult
from policy_assistant.observability.attributes import (
    search_outcome_attributes,
    search_request_attributes,
)
from policy_assistant.observability.config import get_config
from policy_assistant.observability.tracer import get_tracer
from policy_assistant.retrieval.document import Document
from policy_assistant.retrieval.expansion import DEFAULT_SYNONYMS, SynonymMap, expand_query
from policy_assistant.retrieval.scoring import DEFAULT_WEIGHTS, ScoringWeights, score_document

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 2


@dataclass(frozen=True)
class ScoredDocument:
    """A document paired with its relevance score for one query."""
    document: Document
    score: int


class DocumentSearchEngine:
    """
    Lexical search over a fixed corpus with synonym expansion and
    typo-tolerant matching.

    Dependencies are INJECTED: pass a different synonym table or weights
    to change the vocabulary without touching the scoring code.
    """

    def __init__(
        self,
        documents: Iterable[Document],
        synonyms: SynonymMap | None = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        max_results: int = DEFAULT_MAX_RESULTS,
    ):
        """
        Args:
            documents: The corpus (a StaticDocumentStore or any iterable)
            synonyms: Canonical term -> synonyms (default: DEFAULT_SYNONYMS)
            weights: Points per title / content hit
            max_results: Upper bound on results returned by search()

        Raises:
            ConfigurationError: max_results is negative
        """
        self._documents = tuple(documents)
        self._synonyms = DEFAULT_SYNONYMS if synonyms is None else synonyms
        self._weights = weights
        self.max_results = max_results

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    @property
    def max_results(self) -> int:
        return self._max_results

    @max_results.setter
    def max_results(self, value: int) -> None:
        # A negative slice bound would count from the end of the ranking
        if value < 0:
            raise ConfigurationError(f"max_results must be >= 0, got {value}")
        self._max_results = value

    def expand(self, query: str) -> list[str]:
        """Expand a query with this engine's synonym table."""
        return expand_query(query, self._synonyms)

    def rank(self, terms: list[str]) -> list[ScoredDocument]:
        """Score every document and return those with score > 0, best first."""
        scored = [
            ScoredDocument(document=doc, score=score_document(terms, doc, self._weights))
            for doc in self._documents
        ]
        relevant = [s for s in scored if s.score > 0]
        # sorted() is stable: equal scores keep corpus order
        return sorted(relevant, key=lambda s: s.score, reverse=True)

    def score(self, query: str) -> list[ScoredDocument]:
        """Full ranking for a query, without truncation. Used for explain/eval."""
        return self.rank(self.expand(query))

    def search(self, query: str) -> list[SearchResult]:
        """
        Search the corpus.

        Never raises for any string input. Empty, whitespace-only or
        no-match queries return an empty list.

        Returns:
            At most max_results SearchResult objects, most relevant first
        """
        # Query text only at DEBUG, same rule as PHOENIX_CAPTURE_QUERIES for spans
        logger.info(f"Searching ({len(query)} chars)")

        terms = self.expand(query)
        logger.debug(f"Expanded search terms: {terms}")

        tracer = get_tracer()
        with tracer.start_span(
            "document_search",
            attributes=search_request_attributes(
                query,
                expanded_term_count=len(terms),
                capture_query=get_config().capture_queries,
            ),
        ) as span:
            ranked = self.rank(terms)
            top = ranked[: self.max_results]
            results = [s.document.to_result() for s in top]

            span.set_attributes(search_outcome_attributes(
                candidate_count=len(ranked),
                result_titles=[r.title for r in results],
                top_score=top[0].score if top else None,
            ))

        logger.info(f"Found results: {[r.title for r in results]}")
        return results


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


_default_engine: DocumentSearchEngine | None = None


def get_search_engine(
    documents: Iterable[Document] | None = None,
    synonyms: SynonymMap | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> DocumentSearchEngine:
    """
    Factory function to get a search engine.

    With no arguments, returns a shared engine over the seed policy corpus
    (built on first use). Passing documents, synonyms or max_results builds
    a fresh engine.
    """
    global _default_engine

    customized = (
        documents is not None
        or synonyms is not None
        or max_results != DEFAULT_MAX_RESULTS
    )
    if not customized and _default_engine is not None:
        return _default_engine

    if documents is None:
        from policy_assistant.retrieval.seeds import get_policy_store

        documents = get_policy_store()

    engine = DocumentSearchEngine(documents, synonyms=synonyms, max_results=max_results)
    if not customized:
        _default_engine = engine
    return engine


def reset_search_engine() -> None:
    """Drop the shared engine (useful for testing)."""
    global _default_engine
    _default_engine = None


def search_documents(query: str) -> list[SearchResult]:
    """Search the seed policy corpus with the shared engine."""
    return get_search_engine().search(query)
