"""Categorized console logger.

:class:`CategoryLogger` prefixes each message with an upper-case
category label (``ERROR: …``, ``HINT: …``) and renders it through the
console proxy.  With Rich installed the label is coloured; message text
is never parsed as Rich markup, so brackets in command output or file
contents print verbatim.

Categories only change how a line looks.  Host applications construct
one logger at startup and pass it to whatever needs to report.
"""

from __future__ import annotations

from enum import Enum

from cmdline_utils.cli.console import ConsoleProxy, load_rich_text_class
from cmdline_utils.exceptions import EnvironmentError


class LoggerCategory(Enum):
    """Closed set of message categories understood by :class:`CategoryLogger`."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    ERROR = "ERROR"
    COMPLETE = "COMPLETE"
    OPTION = "OPTION"
    OUTPUT = "OUTPUT"
    HINT = "HINT"
    NONE = ""

    @property
    def prefix(self) -> str:
        """Text placed before the message, ``""`` for :attr:`NONE`."""
        return f"{self.value}: " if self.value else ""

    @property
    def style(self) -> str:
        """Rich style applied to the prefix."""
        return _STYLES.get(self, "")


_STYLES: dict[LoggerCategory, str] = {
    LoggerCategory.DEBUG: "dim",
    LoggerCategory.INFO: "bold blue",
    LoggerCategory.ERROR: "bold red",
    LoggerCategory.COMPLETE: "bold green",
    LoggerCategory.OPTION: "bold magenta",
    LoggerCategory.OUTPUT: "bold cyan",
    LoggerCategory.HINT: "yellow",
}


class CategoryLogger:
    """Console logger satisfying :class:`~cmdline_utils.core.protocols.Logger`.

    Parameters
    ----------
    show_debug:
        Whether :attr:`LoggerCategory.DEBUG` messages are displayed.
        Can be overridden per call.
    stderr:
        Write to stderr instead of stdout.
    """

    def __init__(self, *, show_debug: bool = False, stderr: bool = False) -> None:
        self.show_debug: bool = show_debug
        self._console = ConsoleProxy(stderr=stderr)

    def write(
        self,
        message: str,
        category: LoggerCategory = LoggerCategory.NONE,
        *,
        show_debug: bool | None = None,
    ) -> None:
        """Write *message*, prefixed with its *category* label.

        Debug messages are dropped unless debug display is enabled,
        either on the logger or through *show_debug* for this call.
        """
        if category is LoggerCategory.DEBUG:
            enabled = self.show_debug if show_debug is None else show_debug
            if not enabled:
                return

        try:
            text_class = load_rich_text_class()
        except EnvironmentError:
            self._console.print(category.prefix + message)
            return

        line = text_class.assemble((category.prefix, category.style), message)
        self._console.print(line, soft_wrap=True)

    def write_objects(self, *objects: object) -> None:
        """Write the given objects as a single list representation."""
        self.write(repr(list(objects)))
