"""
Golden search queries for the policy knowledge base.

Each case encodes WHICH documents a query must surface, not the exact
scores. Scores are an implementation detail; the ranking outcome is the
contract the chat layer relies on.

GOLDEN SET PHILOSOPHY:
----------------------
- One case per behavior worth protecting: title weighting, synonym
  expansion, typo tolerance, short-token filtering, truncation
- Include queries that must return NOTHING
- expected_titles is ordered when ordered=True (rank matters)
"""

from dataclasses import dataclass, field


@dataclass
class GoldenQuery:
    """A single golden search case."""

    id: str
    description: str
    query: str
    expected_titles: list[str] = field(default_factory=list)
    # True when the first expected title must also be ranked first
    ordered: bool = False


POLICY_QUERIES: list[GoldenQuery] = [
    GoldenQuery(
        id="search-001",
        description="Title words dominate: parental leave policy ranks first",
        query="parental leave",
        expected_titles=["Parental Leave Policy"],
        ordered=True,
    ),
    GoldenQuery(
        id="search-002",
        description="Acronym exact match plus security synonyms",
        query="WFH security",
        expected_titles=["Work From Home (WFH) IT Security Policy"],
        ordered=True,
    ),
    GoldenQuery(
        id="search-003",
        description="One-letter typo still finds the expense guidelines",
        query="expence",
        expected_titles=["Expense Reimbursement Guidelines"],
        ordered=True,
    ),
    GoldenQuery(
        id="search-004",
        description="Synonym lookup is symmetric: 'bullying' reaches the conduct policy",
        query="bullying",
        expected_titles=["Code of Conduct"],
        ordered=True,
    ),
    GoldenQuery(
        id="search-005",
        description="Remote-work synonym resolves to the WFH policy",
        query="telecommute",
        expected_titles=["Work From Home (WFH) IT Security Policy"],
        ordered=True,
    ),
    GoldenQuery(
        id="search-006",
        description="Only short tokens: nothing to search with",
        query="to is",
        expected_titles=[],
    ),
    GoldenQuery(
        id="search-007",
        description="Empty query returns nothing",
        query="",
        expected_titles=[],
    ),
    GoldenQuery(
        id="search-008",
        description="Unrelated topic returns nothing",
        query="quarterly revenue forecast",
        expected_titles=[],
    ),
]


def get_all_golden_queries() -> list[GoldenQuery]:
    """Get all golden search queries."""
    return list(POLICY_QUERIES)


def get_query_by_id(query_id: str) -> GoldenQuery | None:
    """Get a specific golden query by ID, or None if not found."""
    for case in POLICY_QUERIES:
        if case.id == query_id:
            return case
    return None
