"""
Exception types raised at construction time.

The search path itself never raises; these only fire while wiring the
system together (bad corpus, missing credentials).
"""


class PolicyAssistantError(Exception):
    """Base class for all errors raised by this package."""


class CorpusError(PolicyAssistantError, ValueError):
    """The document corpus violates an invariant (duplicate id, empty text)."""


class ConfigurationError(PolicyAssistantError):
    """Required configuration is missing or invalid."""
