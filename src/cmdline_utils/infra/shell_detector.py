"""Infrastructure: bash detection and platform guidance.

The terminal helper needs ``bash`` on PATH.  This module locates it
and suggests install commands when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from cmdline_utils.exceptions import CommandExecutionError


@dataclass(frozen=True, slots=True)
class ShellStatus:
    """Result of a bash lookup on PATH.

    Attributes
    ----------
    found : bool
        Whether bash was located on PATH.
    path : Path | None
        Absolute path to the bash binary, or ``None``.
    version_hint : str
        Human-readable status string (``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty
        when bash is already present.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


def detect_shell() -> ShellStatus:
    """Look for a bash binary on PATH.

    Always returns a :class:`ShellStatus`; the caller decides whether
    a missing shell is fatal.
    """
    result = shutil.which("bash")

    if result is not None:
        resolved = Path(result).resolve()
        return ShellStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return ShellStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


def require_shell() -> Path:
    """Locate bash or raise :class:`CommandExecutionError`."""
    status = detect_shell()
    if not status.found or status.path is None:
        hints: list[str] = []
        if status.install_commands:
            hints.append("Install bash using one of:")
            hints.extend(f"  {cmd}" for cmd in status.install_commands)
        raise CommandExecutionError(
            "bash is not installed or not on PATH.",
            hints=hints or None,
        )
    return status.path


def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Git.Git",
            "wsl --install",
        )
    if system == "linux":
        return (
            "sudo apt install bash",
            "sudo dnf install bash",
            "sudo apk add bash",
        )
    if system == "darwin":
        return ("brew install bash",)
    return ("Please install bash from https://www.gnu.org/software/bash/",)
