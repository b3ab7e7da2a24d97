"""
Span tracer used by search and chat turns.

Two spans exist in this package, ``document_search`` and ``chat_turn``.
Both only ever attach a batch of attributes and, for chat turns, mark a
failure. The span interface is exactly that:

    with get_tracer().start_span("document_search", attributes={...}) as span:
        span.set_attributes({...})
        span.fail("empty response")

get_tracer() hands out a no-op tracer unless tracing is enabled AND
init_phoenix() has installed an SDK TracerProvider.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, ContextManager, Iterator, Mapping, Protocol

Attributes = Mapping[str, Any]


class SpanProtocol(Protocol):

    def set_attributes(self, attributes: Attributes) -> None:
        ...

    def fail(self, description: str, exception: BaseException | None = None) -> None:
        """Mark the span as errored, optionally recording the exception."""
        ...


class TracerProtocol(Protocol):

    def start_span(
        self, name: str, attributes: Attributes | None = None
    ) -> ContextManager[SpanProtocol]:
        ...


class NoOpSpan:

    def set_attributes(self, attributes: Attributes) -> None:
        pass

    def fail(self, description: str, exception: BaseException | None = None) -> None:
        pass


class NoOpTracer:
    """Used whenever tracing is off. Costs one generator per span."""

    @contextmanager
    def start_span(self, name: str, attributes: Attributes | None = None) -> Iterator[NoOpSpan]:
        yield NoOpSpan()


class OTelSpan:
    """Adapts an OpenTelemetry span to SpanProtocol."""

    def __init__(self, span: Any):
        self._span = span

    def set_attributes(self, attributes: Attributes) -> None:
        self._span.set_attributes(dict(attributes))

    def fail(self, description: str, exception: BaseException | None = None) -> None:
        from opentelemetry.trace import Status, StatusCode

        if exception is not None:
            self._span.record_exception(exception)
        self._span.set_status(Status(StatusCode.ERROR, description))


class OTelTracer:

    def __init__(self, tracer: Any):
        self._tracer = tracer

    @contextmanager
    def start_span(self, name: str, attributes: Attributes | None = None) -> Iterator[OTelSpan]:
        with self._tracer.start_as_current_span(
            name, attributes=dict(attributes or {})
        ) as span:
            yield OTelSpan(span)


_tracer: TracerProtocol | None = None


def _build_tracer() -> TracerProtocol:
    from policy_assistant.observability.config import get_config

    if not get_config().enabled:
        return NoOpTracer()

    from opentelemetry import trace
    from opentelemetry.sdk.trace import TracerProvider

    # Still the API's proxy provider until init_phoenix runs
    if not isinstance(trace.get_tracer_provider(), TracerProvider):
        return NoOpTracer()
    return OTelTracer(trace.get_tracer("policy_assistant"))


def get_tracer() -> TracerProtocol:
    """Shared tracer, built on first use."""
    global _tracer
    if _tracer is None:
        _tracer = _build_tracer()
    return _tracer


def reset_tracer() -> None:
    """Forget the shared tracer so the next get_tracer() rebuilds it."""
    global _tracer
    _tracer = None
