"""
CLI module - unified command-line interface.

Provides entry points for:
- Searching the policy knowledge base
- Running the retrieval quality gate
- Chatting with the assistant
"""

from policy_assistant.cli.commands import (
    main,
    run_search_cli,
    run_eval_cli,
    run_chat_cli,
)

__all__ = [
    "main",
    "run_search_cli",
    "run_eval_cli",
    "run_chat_cli",
]
