"""Option declarations: a fixed set of spellings bundled with a value slot.

An :class:`Option` is declared once at application start and read by
the host after evaluation.  Only the evaluator is expected to assign
:attr:`Option.value`, at most once per evaluation pass.
"""

from __future__ import annotations

from typing import Generic, TypeVar

V = TypeVar("V")

OptionVariations = frozenset[str]
"""Every spelling that triggers one logical option (e.g. ``-v``, ``--verbose``).

Two options of one application must not share a variation.  This is
a convention for callers; nothing checks it at runtime.
"""


class Option(Generic[V]):
    """A logical command-line option and its current value.

    Parameters
    ----------
    value:
        Initial value, i.e. what the option holds when it is not
        provided on the command line.
    *variations:
        Spellings that invoke the option.  No format is enforced; an
        option declared with no variations can never be matched.

    Usage::

        verbose = Option(False, "-v", "--verbose")
        output: Option[str | None] = Option.nullable("-o", "--output")
    """

    __slots__ = ("_variations", "value")

    def __init__(self, value: V, *variations: str) -> None:
        self._variations: OptionVariations = frozenset(variations)
        self.value: V = value

    @classmethod
    def nullable(cls, *variations: str) -> Option[V | None]:
        """Declare an option whose "not provided" state is ``None``."""
        return cls(None, *variations)

    @property
    def variations(self) -> OptionVariations:
        """Read-only set of spellings for this option."""
        return self._variations

    def __contains__(self, token: object) -> bool:
        return token in self._variations

    def __repr__(self) -> str:
        spellings = ", ".join(sorted(self._variations))
        return f"Option({{{spellings}}}, value={self.value!r})"
