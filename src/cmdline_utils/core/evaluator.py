"""Detection and removal helpers for :class:`OptionsEvaluator` implementations.

Every function here is a pure transformation over the argument list,
apart from the in-place removal the two ``remove*`` helpers perform on
the list they are given.

A typical ``evaluate`` looks like::

    def evaluate(self, arguments: list[str]) -> list[str]:
        if variation := provided_option(arguments, self.verbose.variations):
            self.verbose.value = True
            remove([variation], arguments)
        return arguments
"""

from __future__ import annotations

from collections.abc import Iterable

from cmdline_utils.exceptions import InvalidArgumentsError

OPTION_PREFIX: str = "-"
"""Marker that starts every option token."""


def _describe(variations: Iterable[str]) -> str:
    return "{" + ", ".join(sorted(variations)) + "}"


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

def provided_option(
    arguments: Iterable[str],
    variations: Iterable[str],
) -> str | None:
    """Return the variation of an option present in *arguments*, if any.

    Argument order and repeats of the same token do not matter:
    ``-v -v`` still matches ``-v`` once.  Two *different* spellings of
    the same option are rejected; neither one wins.

    Raises
    ------
    InvalidArgumentsError
        If more than one distinct variation appears in *arguments*.
    """
    options = frozenset(variations)
    intersection = set(arguments) & options

    if not intersection:
        return None

    if len(intersection) > 1:
        raise InvalidArgumentsError(
            hints=[
                f"too many variations of the option {_describe(options)} were provided",
                f"use only one of: {', '.join(sorted(intersection))}",
            ],
        )

    return next(iter(intersection))


# ---------------------------------------------------------------------------
# Removal
# ---------------------------------------------------------------------------

def remove_all_options(
    arguments: list[str],
    prefix: str = OPTION_PREFIX,
) -> list[str]:
    """Drop every token starting with *prefix*, known option or not.

    The list is modified in place and also returned.
    """
    arguments[:] = [arg for arg in arguments if not arg.startswith(prefix)]
    return arguments


def remove(strings: Iterable[str], arguments: list[str]) -> list[str]:
    """Drop every occurrence of each of *strings* from *arguments*.

    Used to discard a matched variation together with its value
    tokens.  The list is modified in place and also returned.
    """
    discard = set(strings)
    arguments[:] = [arg for arg in arguments if arg not in discard]
    return arguments
