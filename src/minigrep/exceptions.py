"""Custom exception hierarchy for minigrep.

Every failure that crosses a layer boundary is a subclass of
:class:`MinigrepError`.  Raw ``OSError`` / ``UnicodeDecodeError`` values
never escape the infrastructure layer; they are re-raised as
:class:`IoError`.

Hierarchy
---------
MinigrepError
├── UsageError
├── IoError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class MinigrepError(Exception):
    """Base exception for all minigrep errors.

    The CLI error boundary renders these as a clean one-line message
    (plus optional hint) instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument handling -----------------------------------------------------

class UsageError(MinigrepError):
    """Raised when the command line does not have the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        usage: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(f"{message}\n{usage}" if usage else message, hint=hint)
        self.usage: str = usage
        """Usage text naming the program and its positional arguments."""


# --- File access -----------------------------------------------------------

class IoError(MinigrepError):
    """Raised when the target file cannot be opened or decoded as text."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(MinigrepError):
    """Raised when an environment variable holds an unsupported value."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MinigrepError):
    """Raised when an optional runtime dependency is not available."""
