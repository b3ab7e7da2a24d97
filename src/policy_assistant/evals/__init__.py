"""
Evaluation gates for the policy assistant.

Currently one gate: retrieval quality over the golden search queries.
It makes no model calls, so it runs in CI on every change.
"""

from policy_assistant.evals.retrieval_eval import (
    DEFAULT_F1_THRESHOLD,
    RetrievalEvalReport,
    RetrievalEvalResult,
    RetrievalMetrics,
    calculate_retrieval_metrics,
    run_retrieval_eval,
)

__all__ = [
    "DEFAULT_F1_THRESHOLD",
    "RetrievalEvalReport",
    "RetrievalEvalResult",
    "RetrievalMetrics",
    "calculate_retrieval_metrics",
    "run_retrieval_eval",
]
