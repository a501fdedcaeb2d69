"""Exceptions for buildenv.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from buildenv.exceptions import BuildEnvError, ConfigurationError
"""

from buildenv.exceptions.base import BuildEnvError, ConfigurationError

__all__ = [
    "BuildEnvError",
    "ConfigurationError",
]
