"""``cmdline-utils doctor`` — environment diagnostics command.

Checks what the commands rely on: a supported Python, bash for
``run``, and the optional UI packages.  Results are rendered as a Rich
table, or as plain logger lines when Rich is not installed.
"""

from __future__ import annotations

import importlib
import platform
import sys

from cmdline_utils.cli import exit_codes
from cmdline_utils.cli.console import console
from cmdline_utils.cli.logger import CategoryLogger, LoggerCategory
from cmdline_utils.infra.shell_detector import detect_shell
from cmdline_utils.version import __version__

OK = "OK"
WARN = "WARN"
FAIL = "FAIL"

_STATUS_STYLES: dict[str, str] = {OK: "green", WARN: "yellow", FAIL: "red"}

Check = tuple[str, str, str]
"""(component, detail, status) — status is one of OK / WARN / FAIL."""


def _python_check() -> Check:
    supported = sys.version_info[:2] >= (3, 10)
    return "Python", platform.python_version(), OK if supported else FAIL


def _shell_check() -> Check:
    status = detect_shell()
    if status.found:
        return "bash", status.version_hint, OK
    return "bash", "not found (`run` unavailable)", WARN


def _module_check(module: str) -> Check:
    """Optional dependency row: missing modules only warn."""
    try:
        imported = importlib.import_module(module)
    except ImportError:
        return module, "NOT INSTALLED", WARN
    return module, str(getattr(imported, "__version__", "installed")), OK


def collect_checks() -> list[Check]:
    """Run every diagnostic, in display order."""
    return [
        _python_check(),
        _shell_check(),
        _module_check("rich"),
        _module_check("questionary"),
    ]


def _render(checks: list[Check], logger: CategoryLogger) -> None:
    title = f"cmdline-utils {__version__} doctor"
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        logger.write(title)
        for component, detail, status in checks:
            logger.write(f"  {component:<12} {status:<5} {detail}")
        return

    table = Table(title=title, header_style="bold cyan", border_style="dim")
    table.add_column("Component", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Detail")
    for component, detail, status in checks:
        table.add_row(component, f"[{_STATUS_STYLES[status]}]{status}[/]", detail)
    console.print(table)


def run_doctor(logger: CategoryLogger) -> int:
    """Check the environment and report the results.

    Returns
    -------
    int
        :data:`exit_codes.GENERAL_ERROR` if any check failed, otherwise
        :data:`exit_codes.SUCCESS` (warnings do not fail).
    """
    checks = collect_checks()
    _render(checks, logger)

    shell = detect_shell()
    if not shell.found:
        logger.write("install bash with one of:", LoggerCategory.HINT)
        for cmd in shell.install_commands:
            logger.write(f"  {cmd}", LoggerCategory.HINT)

    if any(status == FAIL for _, _, status in checks):
        logger.write("Some checks failed.", LoggerCategory.ERROR)
        return exit_codes.GENERAL_ERROR

    logger.write("All checks passed.", LoggerCategory.COMPLETE)
    return exit_codes.SUCCESS
