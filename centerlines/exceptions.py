"""Exceptions raised by centerlines"""

__all__ = ['ConfigurationError']


class ConfigurationError(ValueError):
    """
    Raised when a pipeline option is unusable (e.g. a non-positive spacing).
    Always raised before any point is processed.
    """
