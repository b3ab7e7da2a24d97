"""
Static document store - the fixed, in-memory corpus.

The corpus is validated once at construction and never changes afterwards,
so any number of searches can read it concurrently without locking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from policy_assistant.core.errors import CorpusError
from policy_assistant.retrieval.document import Document, DocumentCategory

logger = logging.getLogger(__name__)


class StaticDocumentStore:
    """
    Immutable in-memory corpus.

    Raises CorpusError at construction if a document has an empty title or
    content, or if two documents share an id.
    """

    def __init__(self, documents: Iterable[Document]):
        docs = tuple(documents)
        seen: set[str] = set()

        for doc in docs:
            if doc.id in seen:
                raise CorpusError(f"Duplicate document id: {doc.id!r}")
            if not doc.title.strip():
                raise CorpusError(f"Document {doc.id!r} has an empty title")
            if not doc.content.strip():
                raise CorpusError(f"Document {doc.id!r} has empty content")
            seen.add(doc.id)

        self._documents = docs
        self._by_id = {doc.id: doc for doc in docs}
        logger.debug(f"Loaded corpus with {len(docs)} documents")

    def all(self) -> tuple[Document, ...]:
        return self._documents

    def get(self, doc_id: str) -> Document | None:
        return self._by_id.get(doc_id)

    def by_category(self, category: DocumentCategory) -> list[Document]:
        return [doc for doc in self._documents if doc.category == category]

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)
