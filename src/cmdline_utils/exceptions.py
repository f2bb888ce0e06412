"""Custom exception hierarchy for cmdline-utils.

All exceptions that cross layer boundaries must inherit from
:class:`CmdlineUtilsError`.  Raw OS exceptions (``OSError`` from file
or subprocess calls) must never propagate beyond the infrastructure
layer — they are caught there and re-raised as a typed subclass
defined here.

Hierarchy
---------
CmdlineUtilsError
├── InvalidArgumentsError
├── FileError
│   ├── FileReadError
│   └── FileWriteError
├── CommandExecutionError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class CmdlineUtilsError(Exception):
    """Base exception for all cmdline-utils errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    followed by its hints, without leaking stack traces.
    """

    def __init__(self, message: str, *, hints: list[str] | None = None) -> None:
        super().__init__(message)
        self.hints: list[str] | None = hints
        """Optional human-readable guidance shown below the error message."""


# --- Option evaluation -----------------------------------------------------

class InvalidArgumentsError(CmdlineUtilsError):
    """Raised when the argument list cannot be evaluated.

    Either several distinct variations of the same option were supplied,
    or an evaluator's own shape check failed (e.g. a missing value).
    """

    default_message = "invalid arguments were passed in, please check and try again"

    def __init__(
        self,
        message: str | None = None,
        *,
        hints: list[str] | None = None,
    ) -> None:
        super().__init__(message or self.default_message, hints=hints)


# --- Files -----------------------------------------------------------------

class FileError(CmdlineUtilsError):
    """Base for file read/write failures.

    ``raw_log`` keeps the underlying OS message, if there was one.
    """

    default_message = "file operation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        raw_log: str | None = None,
        hints: list[str] | None = None,
    ) -> None:
        super().__init__(message or self.default_message, hints=hints)
        self.raw_log: str | None = raw_log


class FileReadError(FileError):
    """Raised when a file's contents cannot be read."""

    default_message = "failed to read contents from file"


class FileWriteError(FileError):
    """Raised when contents cannot be written to a file."""

    default_message = "failed to write contents to file"


# --- Shell commands --------------------------------------------------------

class CommandExecutionError(CmdlineUtilsError):
    """Raised when a shell command cannot be launched."""


# --- Interaction -----------------------------------------------------------

class PromptCancelledError(CmdlineUtilsError):
    """Raised when the user dismisses an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdlineUtilsError):
    """Raised when an optional runtime dependency is not available."""
