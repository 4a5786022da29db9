"""Error taxonomy for idforge.

Every error raised on purpose by the library derives from ``IdForgeError`` and
also from the builtin exception that best describes it, so callers can catch
either the library type or the familiar builtin.
"""


class IdForgeError(Exception):
    """Base class for all idforge errors."""


class DataConfigurationError(IdForgeError, LookupError):
    """A locale corpus is missing, malformed, or has no entries for a key."""


class InvalidDirectiveError(IdForgeError, ValueError):
    """A property directive names an unknown field or carries a bad value."""


class PipelineOrderError(IdForgeError, RuntimeError):
    """A generation step read a field that no earlier step resolved."""
