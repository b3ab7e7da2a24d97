"""
Unit Tests for Observability Module

Tests the Phoenix/OpenTelemetry integration with focus on:
1. Graceful degradation (NoOpTracer when disabled)
2. Configuration loading from environment
3. Attribute helpers used by search and chat spans

STAFF ENGINEER PATTERNS:
------------------------
1. Tests work WITHOUT Phoenix installed
2. Environment variable handling tested with patch.dict
3. Module singletons reset around every test
"""

import sys

import pytest
from unittest.mock import MagicMock, patch

from opentelemetry.trace import StatusCode

from policy_assistant.observability import init_phoenix, instrumentation, shutdown_phoenix
from policy_assistant.observability.config import (
    ObservabilityConfig,
    get_config,
    reset_config,
)
from policy_assistant.observability.tracer import (
    NoOpSpan,
    NoOpTracer,
    OTelSpan,
    get_tracer,
    reset_tracer,
)
from policy_assistant.observability.attributes import (
    ASSISTANT_HISTORY_LENGTH,
    ASSISTANT_PERSONA,
    GEN_AI_REQUEST_MODEL,
    SEARCH_CANDIDATE_COUNT,
    SEARCH_EXPANDED_TERM_COUNT,
    SEARCH_QUERY,
    SEARCH_QUERY_LENGTH,
    SEARCH_RESULT_COUNT,
    SEARCH_RESULT_TITLES,
    SEARCH_TOP_SCORE,
    assistant_turn_attributes,
    search_outcome_attributes,
    search_request_attributes,
)


@pytest.fixture(autouse=True)
def clean_state():
    reset_config()
    reset_tracer()
    yield
    reset_config()
    reset_tracer()


# ---------------------------------------------------------------------------
# CONFIG TESTS
# ---------------------------------------------------------------------------


class TestObservabilityConfig:

    def test_config_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ObservabilityConfig.from_env()

        assert config.enabled is False
        assert config.project_name == "policy-assistant"
        assert config.collector_endpoint is None
        # Raw employee questions stay out of traces unless opted in
        assert config.capture_queries is False

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes"])
    def test_enabled_truthy_values(self, value):
        with patch.dict("os.environ", {"PHOENIX_ENABLED": value}, clear=True):
            assert ObservabilityConfig.from_env().enabled is True

    @pytest.mark.parametrize("value", ["false", "0", "no", ""])
    def test_enabled_falsy_values(self, value):
        with patch.dict("os.environ", {"PHOENIX_ENABLED": value}, clear=True):
            assert ObservabilityConfig.from_env().enabled is False

    def test_custom_values(self):
        env = {
            "PHOENIX_PROJECT_NAME": "hr-bot",
            "PHOENIX_COLLECTOR_ENDPOINT": "http://collector:6006/v1/traces",
            "PHOENIX_CAPTURE_QUERIES": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ObservabilityConfig.from_env()

        assert config.project_name == "hr-bot"
        assert config.collector_endpoint == "http://collector:6006/v1/traces"
        assert config.capture_queries is True

    def test_empty_endpoint_means_local(self):
        with patch.dict("os.environ", {"PHOENIX_COLLECTOR_ENDPOINT": ""}, clear=True):
            assert ObservabilityConfig.from_env().collector_endpoint is None

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_reloads(self):
        with patch.dict("os.environ", {"PHOENIX_PROJECT_NAME": "first"}, clear=True):
            assert get_config().project_name == "first"
        with patch.dict("os.environ", {"PHOENIX_PROJECT_NAME": "second"}, clear=True):
            assert get_config().project_name == "first"
            reset_config()
            assert get_config().project_name == "second"


# ---------------------------------------------------------------------------
# TRACER TESTS
# ---------------------------------------------------------------------------


class TestNoOpTracer:

    def test_get_tracer_returns_noop_when_disabled(self):
        with patch.dict("os.environ", {"PHOENIX_ENABLED": "false"}, clear=True):
            tracer = get_tracer()

        assert isinstance(tracer, NoOpTracer)

    def test_get_tracer_returns_noop_before_provider_installed(self):
        with patch.dict("os.environ", {"PHOENIX_ENABLED": "true"}, clear=True):
            tracer = get_tracer()

        assert isinstance(tracer, NoOpTracer)

    def test_tracer_is_cached(self):
        assert get_tracer() is get_tracer()

    def test_noop_span_accepts_all_operations(self):
        tracer = NoOpTracer()

        with tracer.start_span("document_search", attributes={"a": 1}) as span:
            assert isinstance(span, NoOpSpan)
            span.set_attributes({"key": "value"})
            span.fail("boom", exception=RuntimeError("boom"))

    def test_noop_span_does_not_swallow_exceptions(self):
        with pytest.raises(RuntimeError):
            with NoOpTracer().start_span("chat_turn"):
                raise RuntimeError("boom")


class TestOTelSpan:

    def test_set_attributes_passes_dict_through(self):
        inner = MagicMock()

        OTelSpan(inner).set_attributes({SEARCH_RESULT_COUNT: 2})

        inner.set_attributes.assert_called_once_with({SEARCH_RESULT_COUNT: 2})

    def test_fail_records_exception_and_error_status(self):
        inner = MagicMock()
        error = RuntimeError("rate limited")

        OTelSpan(inner).fail("rate limited", exception=error)

        inner.record_exception.assert_called_once_with(error)
        status = inner.set_status.call_args.args[0]
        assert status.status_code == StatusCode.ERROR
        assert status.description == "rate limited"

    def test_fail_without_exception(self):
        inner = MagicMock()

        OTelSpan(inner).fail("empty response")

        inner.record_exception.assert_not_called()
        inner.set_status.assert_called_once()


# ---------------------------------------------------------------------------
# ATTRIBUTE HELPERS
# ---------------------------------------------------------------------------


class TestSearchAttributes:

    def test_request_attributes_omit_query_by_default(self):
        attrs = search_request_attributes("parental leave", expanded_term_count=4)

        assert attrs == {SEARCH_QUERY_LENGTH: 14, SEARCH_EXPANDED_TERM_COUNT: 4}

    def test_request_attributes_capture_query_when_asked(self):
        attrs = search_request_attributes("wfh", expanded_term_count=5, capture_query=True)

        assert attrs[SEARCH_QUERY] == "wfh"

    def test_outcome_attributes(self):
        attrs = search_outcome_attributes(
            candidate_count=3,
            result_titles=["Code of Conduct", "Parental Leave Policy"],
            top_score=11,
        )

        assert attrs[SEARCH_CANDIDATE_COUNT] == 3
        assert attrs[SEARCH_RESULT_COUNT] == 2
        assert attrs[SEARCH_RESULT_TITLES] == ["Code of Conduct", "Parental Leave Policy"]
        assert attrs[SEARCH_TOP_SCORE] == 11

    def test_outcome_attributes_without_results(self):
        attrs = search_outcome_attributes(candidate_count=0, result_titles=[])

        assert attrs[SEARCH_RESULT_COUNT] == 0
        assert SEARCH_TOP_SCORE not in attrs


class TestAssistantAttributes:

    def test_turn_attributes(self):
        attrs = assistant_turn_attributes(persona="formal", model="gpt-4o-mini", history_length=6)

        assert attrs[ASSISTANT_PERSONA] == "formal"
        assert attrs[GEN_AI_REQUEST_MODEL] == "gpt-4o-mini"
        assert attrs[ASSISTANT_HISTORY_LENGTH] == 6


# ---------------------------------------------------------------------------
# INITIALIZATION
# ---------------------------------------------------------------------------


class TestInitPhoenix:

    def test_disabled_config_is_a_no_op(self):
        assert init_phoenix(ObservabilityConfig(enabled=False)) is False

    def test_disabled_via_env(self):
        with patch.dict("os.environ", {"PHOENIX_ENABLED": "false"}, clear=True):
            assert init_phoenix() is False

    def test_shutdown_without_init_is_safe(self):
        shutdown_phoenix()


# ---------------------------------------------------------------------------
# INSTRUMENTATION
# ---------------------------------------------------------------------------


OPENINFERENCE_MODULES = (
    "openinference",
    "openinference.instrumentation",
    "openinference.instrumentation.openai",
)


class TestRegisterInstrumentors:

    def test_missing_package_returns_false(self):
        blocked = dict.fromkeys(OPENINFERENCE_MODULES)

        with patch.object(instrumentation, "_instrumented", False), \
                patch.dict(sys.modules, blocked):
            assert instrumentation.register_instrumentors() is False

    def test_instruments_openai_once(self):
        fake = MagicMock()
        modules = {name: fake for name in OPENINFERENCE_MODULES}

        with patch.object(instrumentation, "_instrumented", False), \
                patch.dict(sys.modules, modules):
            assert instrumentation.register_instrumentors() is True
            assert instrumentation.register_instrumentors() is True

        fake.OpenAIInstrumentor.return_value.instrument.assert_called_once_with()
