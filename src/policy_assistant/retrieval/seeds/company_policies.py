"""
Company policy seed data.

The reference knowledge base the assistant grounds its answers in.
In production, this would come from a proper content pipeline.
"""

from __future__ import annotations

from policy_assistant.retrieval.document import Document, DocumentCategory
from policy_assistant.retrieval.store import StaticDocumentStore


def get_policy_documents() -> list[Document]:
    """
    Get seed documents for the company policy knowledge base.

    Covers HR, IT and general policies. The golden search queries in
    golden_sets.policy_queries are written against these documents.
    """
    return [
        Document(
            id="hr-001",
            title="Parental Leave Policy",
            category=DocumentCategory.HR,
            content=(
                "InnovateCorp offers eligible employees up to 16 weeks of paid parental "
                "leave for the birth or adoption of a child. This policy applies to all "
                "full-time employees who have been with the company for at least one year. "
                "Leave can be taken consecutively or intermittently within the first year "
                "of the child's arrival. To apply, please submit a leave request to the HR "
                "department at least 30 days in advance."
            ),
        ),
        Document(
            id="it-001",
            title="Work From Home (WFH) IT Security Policy",
            category=DocumentCategory.IT,
            content=(
                "Employees working from home must ensure their home network is secured "
                "with a strong password (WPA2 or higher). All company-related work must be "
                "conducted on company-issued devices, which come with pre-installed "
                "security software. Connecting to public Wi-Fi for work is strictly "
                "prohibited. All devices must be protected by a password and auto-lock "
                "after 15 minutes of inactivity. For IT support, please create a ticket in "
                "the IT portal."
            ),
        ),
        Document(
            id="gen-001",
            title="Expense Reimbursement Guidelines",
            category=DocumentCategory.GENERAL,
            content=(
                "Employees can be reimbursed for pre-approved, business-related expenses. "
                "To claim reimbursement, submit an expense report with original receipts "
                "through the finance portal within 30 days of the expenditure. Eligible "
                "expenses include travel, meals with clients (up to $75 per person), and "
                "necessary office supplies. Alcohol expenses are not reimbursable. The "
                "finance team processes reimbursements within 10 business days."
            ),
        ),
        Document(
            id="hr-002",
            title="Code of Conduct",
            category=DocumentCategory.HR,
            content=(
                "All employees are expected to maintain a professional and respectful work "
                "environment. Harassment, discrimination, and bullying in any form are not "
                "tolerated. Employees should report any violations of this policy to their "
                "manager or the HR department without fear of retaliation. We are committed "
                "to an inclusive workplace for everyone."
            ),
        ),
    ]


def get_policy_store() -> StaticDocumentStore:
    """Build a validated store over the seed documents."""
    return StaticDocumentStore(get_policy_documents())
