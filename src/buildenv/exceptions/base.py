"""Base exception classes for buildenv.

Every buildenv exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging
"""

from typing import Any, Dict, Optional


class BuildEnvError(Exception):
    """Base exception for all buildenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "MODE_NOT_SET")
        message: Human-readable error message
        details: Optional additional context (variable names, file paths)
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for JSON output.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(BuildEnvError):
    """Raised when the build environment cannot be resolved.

    Covers fatal startup preconditions: a missing mode variable, invalid
    settings, an unreadable package manifest, or phases run out of order.
    """

    pass
