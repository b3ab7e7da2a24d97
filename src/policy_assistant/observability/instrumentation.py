"""
OpenInference auto-instrumentation for the OpenAI client.

Once registered, every chat completion the assistant makes is traced as a
child of the surrounding ``chat_turn`` span, with no code in the session.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_instrumented = False


def register_instrumentors() -> bool:
    """
    Instrument the OpenAI SDK. Safe to call more than once.

    Returns:
        True if instrumentation is active, False when
        openinference-instrumentation-openai is not installed
    """
    global _instrumented
    if _instrumented:
        return True

    try:
        from openinference.instrumentation.openai import OpenAIInstrumentor
    except ImportError:
        logger.debug("openinference-instrumentation-openai not installed, skipping")
        return False

    OpenAIInstrumentor().instrument()
    logger.info("Instrumented OpenAI client")
    _instrumented = True
    return True
