"""
Query expansion via a synonym table.

A query is lowercased, split on whitespace and stripped of short noise
tokens. Each surviving token then pulls in its whole synonym group: if it
is a canonical key, or listed as one of the key's synonyms, the key and
every synonym join the term set. Lookup is therefore symmetric, typing
"remote" finds the same group as typing "wfh".

The table is plain configuration (canonical term -> synonyms) and can be
swapped without touching the scoring code.

Usage:
    from policy_assistant.retrieval.expansion import expand_query

    expand_query("wfh rules")
    # ['wfh', 'rules', 'remote', 'work from home', 'telecommute', 'home office']
"""

from __future__ import annotations

from typing import Mapping, Sequence

SynonymMap = Mapping[str, Sequence[str]]

# Query tokens shorter than this are dropped
MIN_TERM_LENGTH = 3

DEFAULT_SYNONYMS: dict[str, list[str]] = {
    "leave": ["absence", "time off", "vacation", "break"],
    "parental": ["maternity", "paternity", "family", "child"],
    "wfh": ["remote", "work from home", "telecommute", "home office"],
    "security": ["safety", "protection", "secure", "privacy"],
    "policy": ["guideline", "rule", "procedure", "protocol"],
    "expense": ["reimbursement", "cost", "spending", "charge"],
    "conduct": ["behavior", "ethics", "professionalism"],
    "harassment": ["bullying", "discrimination", "abuse"],
    "it": ["information technology", "tech support"],
    "hr": ["human resources"],
}


def tokenize_query(query: str) -> list[str]:
    """Lowercase, split on whitespace runs and drop tokens shorter than MIN_TERM_LENGTH."""
    return [token for token in query.lower().split() if len(token) >= MIN_TERM_LENGTH]


def expand_query(query: str, synonyms: SynonymMap | None = None) -> list[str]:
    """
    Expand a free-text query into the list of terms to search with.

    The filtered query tokens come first, followed by synonym groups in the
    order they were reached. Duplicates are dropped, first occurrence wins.

    Args:
        query: Raw user query (any string, may be empty)
        synonyms: Canonical term -> synonyms. Defaults to DEFAULT_SYNONYMS.

    Returns:
        Ordered, de-duplicated list of lowercase terms. Empty when every
        query token is too short.
    """
    table = DEFAULT_SYNONYMS if synonyms is None else synonyms
    tokens = tokenize_query(query)

    # dict as an insertion-ordered set
    expanded: dict[str, None] = dict.fromkeys(tokens)

    for token in tokens:
        for key, group in table.items():
            if token == key or token in group:
                expanded[key] = None
                for synonym in group:
                    expanded[synonym] = None

    return list(expanded)
