"""Interactive overwrite confirmation for the CLI layer.

Asks the user, via a questionary yes/no prompt, whether an existing
file may be replaced.  Nothing is written here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cmdline_utils.exceptions import EnvironmentError, PromptCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hints=["Pass --force to overwrite files without asking."],
        ) from exc
    return questionary


def confirm_overwrite(path: Path) -> bool:
    """Ask whether the existing file at *path* may be overwritten.

    Returns
    -------
    bool
        ``True`` when the user agreed.

    Raises
    ------
    PromptCancelledError
        If the prompt is dismissed without an answer (Ctrl+C / Esc).
    """
    questionary = _import_questionary()

    answer: bool | None = questionary.confirm(
        f"{path} already exists. Overwrite it?",
        default=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if answer is None:
        raise PromptCancelledError(
            "No answer given.",
            hints=["Pass --force to overwrite files without asking."],
        )

    return answer
