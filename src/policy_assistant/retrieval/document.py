"""
Document model for the retrieval system.

Single responsibility: Define the structure of the policy documents
the search engine scores.
"""

from dataclasses import dataclass
from enum import Enum

from policy_assistant.core.protocols import SearchResult


class DocumentCategory(str, Enum):
    """Closed set of document categories. Metadata only, never scored."""

    HR = "HR"
    IT = "IT"
    GENERAL = "General"


@dataclass(frozen=True)
class Document:
    """
    A policy document in the internal knowledge base.

    Title and content are tokenized at query time; nothing is
    pre-indexed. For callers, convert to SearchResult with to_result().
    """
    id: str
    title: str
    category: DocumentCategory
    content: str

    def to_result(self) -> SearchResult:
        """Project to the caller-facing result (no id, no score)."""
        return SearchResult(title=self.title, content=self.content)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category.value,
            "content": self.content,
        }
