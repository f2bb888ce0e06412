"""Options understood by the ``cmdline-utils`` host application.

:class:`AppOptions` is the application's
:class:`~cmdline_utils.core.protocols.OptionsEvaluator`.  Everything
after a literal ``--`` is passed through untouched, so shell commands
given to ``run`` may carry their own flags.
"""

from __future__ import annotations

from cmdline_utils.core.evaluator import (
    OPTION_PREFIX,
    provided_option,
    remove,
    remove_all_options,
)
from cmdline_utils.core.option import Option
from cmdline_utils.exceptions import InvalidArgumentsError

PASSTHROUGH_MARKER: str = "--"


class AppOptions:
    """Declared options and their values after :meth:`evaluate`."""

    def __init__(self) -> None:
        self.verbose: Option[bool] = Option(False, "-v", "--verbose")
        self.output: Option[str | None] = Option.nullable("-o", "--output")
        self.force: Option[bool] = Option(False, "-f", "--force")
        self.no_wait: Option[bool] = Option(False, "-n", "--no-wait")
        self.version: Option[bool] = Option(False, "-V", "--version")
        self.help: Option[bool] = Option(False, "-h", "--help")
        self.unknown: list[str] = []
        """Option-like tokens that matched no declared option."""

    def flags(self) -> tuple[Option[bool], ...]:
        """Options that take no value."""
        return (self.verbose, self.force, self.no_wait, self.version, self.help)

    def evaluate(self, arguments: list[str]) -> list[str]:
        """Fill option values from *arguments* and return the operands.

        Raises
        ------
        InvalidArgumentsError
            On conflicting spellings of one option, or when
            ``--output`` has no value.
        """
        if PASSTHROUGH_MARKER in arguments:
            split = arguments.index(PASSTHROUGH_MARKER)
            head, tail = arguments[:split], arguments[split + 1:]
        else:
            head, tail = list(arguments), []

        for option in self.flags():
            variation = provided_option(head, option.variations)
            if variation is not None:
                option.value = True
                remove([variation], head)

        variation = provided_option(head, self.output.variations)
        if variation is not None:
            self.output.value = _consume_value(head, variation)

        self.unknown = [arg for arg in head if arg.startswith(OPTION_PREFIX)]
        remove_all_options(head)

        arguments[:] = head + tail
        return arguments


def _consume_value(arguments: list[str], variation: str) -> str:
    """Delete each *variation* and the token after it; return that value.

    Only the consumed positions are removed, so an operand spelled like
    the value survives.  Repeating the option with the same value is
    fine; different values are rejected rather than one winning.
    """
    values: list[str] = []
    while variation in arguments:
        index = arguments.index(variation)
        if index + 1 >= len(arguments) or arguments[index + 1].startswith(OPTION_PREFIX):
            raise InvalidArgumentsError(
                f"option {variation} requires a value",
                hints=[f"usage: {variation} <file>"],
            )
        values.append(arguments[index + 1])
        del arguments[index:index + 2]

    if len(set(values)) > 1:
        raise InvalidArgumentsError(
            f"option {variation} was given different values",
            hints=[f"pass {variation} once; got: {', '.join(values)}"],
        )
    return values[0]
