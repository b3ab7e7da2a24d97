"""
Retrieval Quality Eval

Checks that the search engine surfaces the RIGHT policies for the golden
queries before any model ever sees them.

WHY RETRIEVAL QUALITY MATTERS:
------------------------------
The assistant answers from the excerpts the search tool returns. If the
wrong policy comes back, even a perfect model cites the wrong rule.

This gate catches:
- Synonym table edits that break expansion
- Threshold or weight changes that reorder results
- Corpus edits that make a policy unreachable

METRICS:
--------
RECALL:    |retrieved ∩ expected| / |expected|
PRECISION: |retrieved ∩ expected| / |retrieved|
F1:        2 * (precision * recall) / (precision + recall)

Documents are compared by title, which is what the caller receives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from policy_assistant.core.protocols import DocumentSearcher
from policy_assistant.golden_sets import GoldenQuery, get_all_golden_queries

logger = logging.getLogger(__name__)

DEFAULT_F1_THRESHOLD = 0.8


@dataclass
class RetrievalMetrics:
    """Retrieval quality metrics for a single query."""
    recall: float
    precision: float
    f1_score: float
    retrieved_titles: list[str]
    expected_titles: list[str]
    missing_titles: list[str]
    extra_titles: list[str]


@dataclass
class RetrievalEvalResult:
    """Result of retrieval eval for a single query."""
    case_id: str
    query: str
    passed: bool
    rank_ok: bool
    metrics: RetrievalMetrics


@dataclass
class RetrievalEvalReport:
    """Aggregate retrieval eval results."""
    total_cases: int
    passed_cases: int
    failed_cases: int
    avg_recall: float
    avg_precision: float
    avg_f1: float
    threshold: float
    results: list[RetrievalEvalResult]

    @property
    def all_passed(self) -> bool:
        return self.failed_cases == 0

    @property
    def pass_rate(self) -> float:
        if self.total_cases == 0:
            return 0.0
        return self.passed_cases / self.total_cases


def calculate_retrieval_metrics(
    retrieved: list[str],
    expected: list[str],
) -> RetrievalMetrics:
    """
    Calculate retrieval quality metrics.

    With no expected documents the only correct answer is an empty
    result: precision and F1 are 1.0 then, 0.0 otherwise.
    """
    retrieved_set = set(retrieved)
    expected_set = set(expected)

    if not expected_set:
        return RetrievalMetrics(
            recall=1.0,  # Vacuously true
            precision=1.0 if not retrieved_set else 0.0,
            f1_score=1.0 if not retrieved_set else 0.0,
            retrieved_titles=retrieved,
            expected_titles=expected,
            missing_titles=[],
            extra_titles=sorted(retrieved_set),
        )

    overlap = retrieved_set & expected_set
    missing = expected_set - retrieved_set
    extra = retrieved_set - expected_set

    recall = len(overlap) / len(expected_set)
    precision = len(overlap) / len(retrieved_set) if retrieved_set else 0.0

    if precision + recall > 0:
        f1 = 2 * (precision * recall) / (precision + recall)
    else:
        f1 = 0.0

    return RetrievalMetrics(
        recall=recall,
        precision=precision,
        f1_score=f1,
        retrieved_titles=retrieved,
        expected_titles=expected,
        missing_titles=sorted(missing),
        extra_titles=sorted(extra),
    )


def _rank_ok(case: GoldenQuery, retrieved: list[str]) -> bool:
    """For ordered cases the first expected title must be ranked first."""
    if not case.ordered or not case.expected_titles:
        return True
    return bool(retrieved) and retrieved[0] == case.expected_titles[0]


def run_retrieval_eval(
    queries: list[GoldenQuery] | None = None,
    searcher: DocumentSearcher | None = None,
    threshold: float = DEFAULT_F1_THRESHOLD,
    verbose: bool = False,
) -> RetrievalEvalReport:
    """
    Run retrieval eval on golden queries.

    Args:
        queries: Queries to evaluate. Defaults to all golden queries.
        searcher: Engine under test. Defaults to the shared seed-corpus engine.
        threshold: Minimum F1 score to pass. Default 0.8.
        verbose: Print progress.

    Returns:
        RetrievalEvalReport with metrics for each query.
    """
    if searcher is None:
        from policy_assistant.retrieval import get_search_engine

        searcher = get_search_engine()

    queries = queries if queries is not None else get_all_golden_queries()
    results: list[RetrievalEvalResult] = []

    for case in queries:
        if verbose:
            print(f"Running retrieval eval: {case.id}...")

        retrieved = [r.title for r in searcher.search(case.query)]
        metrics = calculate_retrieval_metrics(retrieved, case.expected_titles)
        rank_ok = _rank_ok(case, retrieved)
        passed = metrics.f1_score >= threshold and rank_ok

        if not passed:
            logger.warning(
                f"Retrieval case {case.id} failed: F1={metrics.f1_score:.2f}, "
                f"rank_ok={rank_ok}, retrieved={retrieved}"
            )

        results.append(RetrievalEvalResult(
            case_id=case.id,
            query=case.query,
            passed=passed,
            rank_ok=rank_ok,
            metrics=metrics,
        ))

    if results:
        avg_recall = sum(r.metrics.recall for r in results) / len(results)
        avg_precision = sum(r.metrics.precision for r in results) / len(results)
        avg_f1 = sum(r.metrics.f1_score for r in results) / len(results)
        passed_count = sum(1 for r in results if r.passed)
    else:
        avg_recall = avg_precision = avg_f1 = 0.0
        passed_count = 0

    return RetrievalEvalReport(
        total_cases=len(results),
        passed_cases=passed_count,
        failed_cases=len(results) - passed_count,
        avg_recall=avg_recall,
        avg_precision=avg_precision,
        avg_f1=avg_f1,
        threshold=threshold,
        results=results,
    )
