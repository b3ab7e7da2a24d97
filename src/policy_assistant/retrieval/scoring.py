"""
Relevance scoring - fuzzy token matching with weighted fields.

Each expanded term is compared against every cleaned token of a document's
title and content. A token counts as a hit when its edit distance to the
term is within the term's threshold:

    len(term) <= 3  -> exact match only (threshold 0)
    len(term) >  3  -> one typo allowed (threshold 1)

Title hits are worth ScoringWeights.title, content hits ScoringWeights.content.
Every hit counts, so a word repeated in the body adds up (frequency signal).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from policy_assistant.retrieval.document import Document
from policy_assistant.retrieval.matcher import levenshtein

# Characters removed from document tokens before comparison
PUNCTUATION = ".,()"
_STRIP_PUNCTUATION = str.maketrans("", "", PUNCTUATION)

# Terms up to this length must match exactly
EXACT_MATCH_MAX_LENGTH = 3


@dataclass(frozen=True)
class ScoringWeights:
    """Points per matching token. Title hits are rarer and more telling."""

    title: int = 5
    content: int = 1


DEFAULT_WEIGHTS = ScoringWeights()


def tokenize(text: str) -> list[str]:
    """Lowercase and split on whitespace."""
    return text.lower().split()


def clean_token(token: str) -> str:
    """Remove punctuation characters anywhere in the token: '(wfh)' -> 'wfh'."""
    return token.translate(_STRIP_PUNCTUATION)


def match_threshold(term: str) -> int:
    """Maximum edit distance at which a token still matches ``term``."""
    return 0 if len(term) <= EXACT_MATCH_MAX_LENGTH else 1


def count_matches(term: str, tokens: Iterable[str]) -> int:
    """Count the tokens within the term's fuzzy-match threshold."""
    threshold = match_threshold(term)
    return sum(1 for token in tokens if levenshtein(term, token) <= threshold)


def score_document(
    terms: Iterable[str],
    document: Document,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """
    Compute the relevance score of one document for a set of terms.

    Args:
        terms: Expanded query terms (see expansion.expand_query)
        document: Document to score
        weights: Points per title / content hit

    Returns:
        Non-negative integer score. 0 means no relevance signal at all.
    """
    title_tokens = [clean_token(t) for t in tokenize(document.title)]
    content_tokens = [clean_token(t) for t in tokenize(document.content)]

    score = 0
    for term in terms:
        score += weights.title * count_matches(term, title_tokens)
        score += weights.content * count_matches(term, content_tokens)
    return score
