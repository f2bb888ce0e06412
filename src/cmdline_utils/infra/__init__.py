"""Infrastructure layer — operating-system integration.

This layer wraps file access, subprocess execution and shell lookup.
Every raw ``OSError`` is caught here and re-raised as a
:class:`~cmdline_utils.exceptions.CmdlineUtilsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cmdline_utils.infra.file_helper import read_file, write_file
from cmdline_utils.infra.shell_detector import ShellStatus, detect_shell, require_shell
from cmdline_utils.infra.terminal_helper import execute

__all__: list[str] = [
    "ShellStatus",
    "detect_shell",
    "execute",
    "read_file",
    "require_shell",
    "write_file",
]
