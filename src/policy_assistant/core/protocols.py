"""
Core protocols defining contracts for the assistant.

The search engine, the document store and the chat layer only depend
on these contracts, so each side can be swapped or faked in tests.

PATTERN:
--------
- Protocol defines the contract
- Concrete classes implement it (DocumentSearchEngine, StaticDocumentStore)
- Factory functions handle instantiation (get_search_engine)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

if TYPE_CHECKING:
    from policy_assistant.retrieval.document import Document, DocumentCategory


# ---------------------------------------------------------------------------
# SEARCH RESULT
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchResult:
    """
    A matched document as handed to the caller.

    Read-only projection of a Document: id and score are dropped,
    only the citation title and the excerpt text survive.
    """
    title: str
    content: str

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content}


# ---------------------------------------------------------------------------
# DOCUMENT SEARCHER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class DocumentSearcher(Protocol):
    """
    Contract for searching the internal knowledge base.

    Implementations:
    - DocumentSearchEngine (lexical, fuzzy-matching)
    """

    def search(self, query: str) -> list[SearchResult]:
        """Return the most relevant documents for a free-text query."""
        ...


# ---------------------------------------------------------------------------
# DOCUMENT STORE PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class DocumentStore(Protocol):
    """
    Contract for the fixed corpus supplier.

    Implementations:
    - StaticDocumentStore (in-memory, validated at construction)
    """

    def all(self) -> tuple[Document, ...]:
        """Return every document in corpus order."""
        ...

    def get(self, doc_id: str) -> Document | None:
        """Look up a document by id."""
        ...

    def by_category(self, category: DocumentCategory) -> list[Document]:
        """Return the documents in one category, corpus order preserved."""
        ...

    def __iter__(self) -> Iterator[Document]:
        ...

    def __len__(self) -> int:
        ...
