"""
Observability Module - Phoenix + OpenTelemetry Integration

Traces searches and chat turns. Disabled by default, in which case every
span is a no-op.

USAGE:
------
# At application startup:
from policy_assistant.observability import init_phoenix

init_phoenix()  # Starts local Phoenix UI if PHOENIX_ENABLED=true

# In code that needs tracing:
from policy_assistant.observability import get_tracer

tracer = get_tracer()
with tracer.start_span("my_operation", attributes={"key": "value"}) as span:
    span.set_attributes({"result_count": 2})
"""

from __future__ import annotations

import logging

from policy_assistant.observability.config import (
    ObservabilityConfig,
    get_config,
    reset_config,
)
from policy_assistant.observability.tracer import (
    TracerProtocol,
    SpanProtocol,
    NoOpTracer,
    NoOpSpan,
    get_tracer,
    reset_tracer,
)
from policy_assistant.observability.attributes import (
    SEARCH_QUERY,
    SEARCH_EXPANDED_TERM_COUNT,
    SEARCH_RESULT_COUNT,
    ASSISTANT_PERSONA,
    ASSISTANT_TOOL_CALLS,
    search_request_attributes,
    search_outcome_attributes,
    assistant_turn_attributes,
)

logger = logging.getLogger(__name__)

_phoenix_initialized = False


def init_phoenix(config: ObservabilityConfig | None = None) -> bool:
    """
    Initialize Phoenix observability.

    Call once at application startup. Sets up the OpenTelemetry tracer
    provider and registers the OpenAI auto-instrumentor.

    Args:
        config: Optional config (uses env vars if not provided)

    Returns:
        True if Phoenix was initialized, False if disabled or unavailable
    """
    global _phoenix_initialized
    if _phoenix_initialized:
        return True

    config = config or get_config()

    if not config.enabled:
        logger.debug("Phoenix observability disabled")
        return False

    from opentelemetry import trace
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    if config.collector_endpoint:
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        exporter = OTLPSpanExporter(endpoint=config.collector_endpoint)
        logger.info(f"Phoenix connecting to remote: {config.collector_endpoint}")
    else:
        try:
            import phoenix as px
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        except ImportError as e:
            logger.warning(f"Phoenix not installed, observability disabled: {e}")
            return False

        session = px.launch_app()
        exporter = OTLPSpanExporter(endpoint=f"{session.url.rstrip('/')}/v1/traces")
        logger.info(f"Phoenix UI available at: {session.url}")

    # Phoenix groups traces by this resource attribute
    provider = TracerProvider(
        resource=Resource.create({"openinference.project.name": config.project_name})
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    from policy_assistant.observability.instrumentation import register_instrumentors
    register_instrumentors()

    # Drop any NoOpTracer handed out before the provider existed
    reset_tracer()
    _phoenix_initialized = True
    return True


def shutdown_phoenix() -> None:
    """Flush spans and reset module state."""
    global _phoenix_initialized

    if not _phoenix_initialized:
        return

    from opentelemetry import trace
    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()

    reset_tracer()
    reset_config()
    _phoenix_initialized = False


__all__ = [
    # Initialization
    "init_phoenix",
    "shutdown_phoenix",
    # Config
    "ObservabilityConfig",
    "get_config",
    "reset_config",
    # Tracer
    "TracerProtocol",
    "SpanProtocol",
    "NoOpTracer",
    "NoOpSpan",
    "get_tracer",
    "reset_tracer",
    # Attributes
    "SEARCH_QUERY",
    "SEARCH_EXPANDED_TERM_COUNT",
    "SEARCH_RESULT_COUNT",
    "ASSISTANT_PERSONA",
    "ASSISTANT_TOOL_CALLS",
    # Helpers
    "search_request_attributes",
    "search_outcome_attributes",
    "assistant_turn_attributes",
]
