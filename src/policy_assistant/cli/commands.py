"""
CLI commands - entry points for search, eval and chat.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment
3. Run the operation
4. Print results
5. Return exit code

Commands are thin wrappers: the work lives in retrieval, evals and agent.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_search_cli() -> int:
    """CLI entry point for a one-off document search."""
    from policy_assistant.retrieval import get_search_engine

    _load_env()

    parser = argparse.ArgumentParser(description="Search the policy knowledge base")
    parser.add_argument("query", nargs="+", help="Free-text query")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show expanded terms and every document's score",
    )
    parser.add_argument("--limit", type=int, default=2, help="Maximum results (default: 2)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()
    if args.limit < 0:
        parser.error(f"--limit must be >= 0, got {args.limit}")
    _configure_logging(args.verbose)

    query = " ".join(args.query)
    engine = get_search_engine(max_results=args.limit)

    if args.explain:
        print(f"Expanded terms: {engine.expand(query)}")
        for scored in engine.score(query):
            print(f"  {scored.score:>4}  {scored.document.id}  {scored.document.title}")
        print()

    results = engine.search(query)
    if not results:
        print("No relevant internal documents found.")
        return 1

    for i, result in enumerate(results, start=1):
        print(f"[{i}] {result.title}")
        print(f"    {result.content}")
    return 0


def run_eval_cli() -> int:
    """CLI entry point for the retrieval quality gate."""
    from policy_assistant.evals import DEFAULT_F1_THRESHOLD, run_retrieval_eval

    _load_env()

    parser = argparse.ArgumentParser(description="Run retrieval quality eval")
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_F1_THRESHOLD,
        help=f"Minimum F1 per query (default: {DEFAULT_F1_THRESHOLD})",
    )
    parser.add_argument("--quiet", action="store_true", help="Minimal output")
    args = parser.parse_args()
    _configure_logging(False)

    print("=" * 60)
    print("RETRIEVAL QUALITY EVAL")
    print("=" * 60)

    report = run_retrieval_eval(threshold=args.threshold)

    if not args.quiet:
        for result in report.results:
            status = "PASS" if result.passed else "FAIL"
            m = result.metrics
            print(f"  [{status}] {result.case_id} \"{result.query}\" (F1: {m.f1_score:.2f})")
            if m.missing_titles:
                print(f"        Missing: {m.missing_titles}")
            if m.extra_titles:
                print(f"        Extra: {m.extra_titles}")
            if not result.rank_ok:
                print(f"        Wrong top result: {m.retrieved_titles[:1]}")

    print(f"\nAverage F1: {report.avg_f1:.2f}")
    print(f"Threshold: {report.threshold}")
    print(f"Passed: {report.passed_cases}/{report.total_cases}")

    if report.all_passed:
        print("\n>>> RETRIEVAL EVAL GATE: PASSED <<<")
        return 0
    else:
        print("\n>>> RETRIEVAL EVAL GATE: FAILED <<<")
        return 1


def run_chat_cli() -> int:
    """CLI entry point for an interactive chat with the assistant."""
    from policy_assistant.agent import (
        INITIAL_GREETING,
        ChatError,
        Persona,
        create_session,
    )
    from policy_assistant.core.errors import ConfigurationError
    from policy_assistant.observability import init_phoenix, shutdown_phoenix

    _load_env()

    parser = argparse.ArgumentParser(description="Chat with the policy assistant")
    parser.add_argument(
        "--persona",
        choices=[p.value for p in Persona],
        default=Persona.FRIENDLY.value,
        help="Assistant tone (default: friendly)",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()
    _configure_logging(args.verbose)

    try:
        session = create_session(
            persona=args.persona,
            on_search=lambda: print("  (searching company documents...)"),
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    init_phoenix()
    print(f"Eva: {INITIAL_GREETING}")
    print("Commands: /persona <friendly|formal|concise>, /clear, /quit\n")

    try:
        while True:
            try:
                text = input("You: ").strip()
            except EOFError:
                break

            if not text:
                continue
            if text == "/quit":
                break
            if text == "/clear":
                session = session.clear()
                print(f"Eva: {INITIAL_GREETING}")
                continue
            if text.startswith("/persona"):
                name = text.removeprefix("/persona").strip()
                if name not in [p.value for p in Persona]:
                    print(f"Unknown persona: {name!r}")
                    continue
                session = session.with_persona(name)
                print(f"Eva: {INITIAL_GREETING}")
                continue

            reply = session.send_message(text)
            if isinstance(reply, ChatError):
                print(reply.display_text)
            else:
                print(f"Eva: {reply.text}")
    finally:
        shutdown_phoenix()

    return 0


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        policy-assistant search parental leave   # Search the knowledge base
        policy-assistant eval                    # Run the retrieval gate
        policy-assistant chat                    # Talk to the assistant
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="Enterprise policy assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  search      Search the policy knowledge base (no LLM calls)
  eval        Run retrieval quality eval over golden queries
  chat        Interactive chat with the assistant (needs OPENAI_API_KEY)

Examples:
  policy-assistant search "wfh security" --explain
  policy-assistant eval --threshold 1.0
  policy-assistant chat --persona concise
        """,
    )

    parser.add_argument(
        "command",
        choices=["search", "eval", "chat"],
        help="Command to run",
    )

    args, remaining = parser.parse_known_args()

    commands = {
        "search": run_search_cli,
        "eval": run_eval_cli,
        "chat": run_chat_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
