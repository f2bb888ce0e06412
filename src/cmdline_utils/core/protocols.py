"""Protocols (interfaces) shared across layers.

Host applications implement :class:`OptionsEvaluator`; the CLI layer
ships a :class:`Logger` implementation.  Both are satisfied
structurally — no explicit inheritance required.
"""

from __future__ import annotations

from typing import Protocol


class OptionsEvaluator(Protocol):
    """Contract for components that consume the process argument list.

    Implementations declare their own :class:`~cmdline_utils.core.option.Option`
    instances and build :meth:`evaluate` from the helpers in
    :mod:`cmdline_utils.core.evaluator`.
    """

    def evaluate(self, arguments: list[str]) -> list[str]:
        """Detect managed options in *arguments* and strip them.

        Parameters
        ----------
        arguments:
            Arguments passed to the application, excluding the
            program name.  May be modified in place.

        Returns
        -------
        list[str]
            The arguments left once every option token (and any value
            token belonging to it) is removed, in original order.

        Raises
        ------
        InvalidArgumentsError
            When options are ambiguous or malformed.
        """
        ...  # pragma: no cover


class Logger(Protocol):
    """Contract for console message sinks."""

    def write(self, message: str) -> None:
        """Write a plain message."""
        ...  # pragma: no cover

    def write_objects(self, *objects: object) -> None:
        """Write one or more arbitrary objects."""
        ...  # pragma: no cover
