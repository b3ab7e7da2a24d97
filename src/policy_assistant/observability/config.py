"""
Tracing settings, read from PHOENIX_* environment variables.

    PHOENIX_ENABLED             trace searches and chat turns (default off)
    PHOENIX_PROJECT_NAME        project shown in the Phoenix UI
    PHOENIX_COLLECTOR_ENDPOINT  remote OTLP endpoint; empty launches a local app
    PHOENIX_CAPTURE_QUERIES     put raw search queries on spans (default off)

Employee questions can describe leave, health or harassment reports, so
query text is opt-in separately from tracing itself.
"""

import os
from dataclasses import dataclass

DEFAULT_PROJECT_NAME = "policy-assistant"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class ObservabilityConfig:
    enabled: bool = False
    project_name: str = DEFAULT_PROJECT_NAME
    collector_endpoint: str | None = None
    capture_queries: bool = False

    @classmethod
    def from_env(cls) -> "ObservabilityConfig":
        return cls(
            enabled=_env_flag("PHOENIX_ENABLED"),
            project_name=os.environ.get("PHOENIX_PROJECT_NAME") or DEFAULT_PROJECT_NAME,
            collector_endpoint=os.environ.get("PHOENIX_COLLECTOR_ENDPOINT") or None,
            capture_queries=_env_flag("PHOENIX_CAPTURE_QUERIES"),
        )


_config: ObservabilityConfig | None = None


def get_config() -> ObservabilityConfig:
    """Shared config, loaded from the environment on first use."""
    global _config
    if _config is None:
        _config = ObservabilityConfig.from_env()
    return _config


def reset_config() -> None:
    global _config
    _config = None
