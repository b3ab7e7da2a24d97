"""
Golden Sets Package

Search queries with the documents they must (or must not) surface.

Example:
    from policy_assistant.golden_sets import GoldenQuery, get_all_golden_queries
"""

from policy_assistant.golden_sets.policy_queries import (
    GoldenQuery,
    POLICY_QUERIES,
    get_all_golden_queries,
    get_query_by_id,
)

__all__ = [
    "GoldenQuery",
    "POLICY_QUERIES",
    "get_all_golden_queries",
    "get_query_by_id",
]
