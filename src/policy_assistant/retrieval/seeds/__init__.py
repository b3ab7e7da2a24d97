"""
Seed data for the retrieval system.

Keeps knowledge base content separate from search infrastructure, so the
corpus can change without code changes to the engine.
"""

from policy_assistant.retrieval.seeds.company_policies import (
    get_policy_documents,
    get_policy_store,
)

__all__ = ["get_policy_documents", "get_policy_store"]
