"""CLI application entry point and command routing for cmdline-utils.

This module is the **sole error boundary** for the application.  It
catches :class:`~cmdline_utils.exceptions.CmdlineUtilsError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, reports them
through the :class:`~cmdline_utils.cli.logger.CategoryLogger` and
returns well-defined exit codes.

Architecture notes
------------------
* Options are declared and evaluated through :class:`AppOptions`; no
  argparse.  Remaining operands select and feed the command.
* The logger and the options are built once per invocation and passed
  down explicitly.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import sys
from pathlib import Path

from cmdline_utils.cli import exit_codes
from cmdline_utils.cli.logger import CategoryLogger, LoggerCategory
from cmdline_utils.cli.options import AppOptions
from cmdline_utils.exceptions import CmdlineUtilsError, InvalidArgumentsError
from cmdline_utils.version import __version__

PROG = "cmdline-utils"

USAGE = f"""\
usage: {PROG} [options] <command> [arguments...] [-- passthrough...]

commands:
  run <command...>        run a shell command and show its output
  cat <file>              print a text file
  write <file> <text...>  write text into a file
  doctor                  check the runtime environment

options:
  -v, --verbose           show debug messages
  -o, --output <file>     also save the command's output to <file>
  -f, --force             overwrite files without asking
  -n, --no-wait           do not wait for `run` commands to exit
  -V, --version           show the version and exit
  -h, --help              show this message and exit

Arguments after `--` are never treated as options."""


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _save_output(
    contents: str,
    target: str,
    options: AppOptions,
    logger: CategoryLogger,
) -> bool:
    """Write *contents* to *target*, asking first if it already exists.

    Returns ``False`` when the user chose to keep the existing file.
    """
    from cmdline_utils.infra.file_helper import write_file

    location = Path.cwd() / target
    if location.exists() and not options.force.value:
        from cmdline_utils.cli.confirm_prompt import confirm_overwrite

        if not confirm_overwrite(location):
            logger.write(f"left {location} unchanged", LoggerCategory.INFO)
            return False

    written = write_file(contents, target)
    logger.write(f"wrote {written}", LoggerCategory.DEBUG)
    return True


def _handle_run(operands: list[str], options: AppOptions, logger: CategoryLogger) -> int:
    """Run a shell command and log its combined output."""
    from cmdline_utils.infra.shell_detector import require_shell
    from cmdline_utils.infra.terminal_helper import execute

    if not operands:
        raise InvalidArgumentsError(
            "no command given to run",
            hints=[f"usage: {PROG} run <command...>"],
        )

    command = " ".join(operands)
    shell = require_shell()
    logger.write(f"running `{command}` with {shell}", LoggerCategory.DEBUG)

    output = execute(command, wait=not options.no_wait.value)
    if output:
        logger.write(output.rstrip("\n"), LoggerCategory.OUTPUT)

    if options.output.value is not None:
        _save_output(output, options.output.value, options, logger)

    logger.write(f"`{command}` finished", LoggerCategory.COMPLETE)
    return exit_codes.SUCCESS


def _handle_cat(operands: list[str], options: AppOptions, logger: CategoryLogger) -> int:
    """Print a text file."""
    from cmdline_utils.infra.file_helper import read_file

    if len(operands) != 1:
        raise InvalidArgumentsError(
            "cat takes exactly one file",
            hints=[f"usage: {PROG} cat <file>"],
        )

    contents = read_file(operands[0])
    logger.write(contents.rstrip("\n"))

    if options.output.value is not None:
        _save_output(contents, options.output.value, options, logger)
    return exit_codes.SUCCESS


def _handle_write(operands: list[str], options: AppOptions, logger: CategoryLogger) -> int:
    """Write the remaining operands, space-joined, into a file."""
    if len(operands) < 2:
        raise InvalidArgumentsError(
            "write needs a file and some text",
            hints=[f"usage: {PROG} write <file> <text...>"],
        )

    target, words = operands[0], operands[1:]
    if _save_output(" ".join(words) + "\n", target, options, logger):
        logger.write(f"saved {target}", LoggerCategory.COMPLETE)
    return exit_codes.SUCCESS


def _report_unknown(
    unknown: list[str],
    operands: list[str],
    logger: CategoryLogger,
) -> None:
    """Tell the user which option tokens were dropped.

    Shown by default for ``run``, where a dropped flag silently changes
    the command line; a debug message otherwise.
    """
    if operands[:1] == ["run"]:
        logger.write(f"ignoring unknown options: {' '.join(unknown)}", LoggerCategory.INFO)
        logger.write(
            f"put the command after `--` to keep its flags, e.g. `{PROG} run -- ls -la`",
            LoggerCategory.HINT,
        )
        return
    for token in unknown:
        logger.write(f"ignoring unknown option {token}", LoggerCategory.DEBUG)


def _handle_doctor(logger: CategoryLogger) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from cmdline_utils.cli.doctor import run_doctor

    return run_doctor(logger)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, logger: CategoryLogger | None = None) -> int:
    """Run the cmdline-utils CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    logger:
        Destination for all messages.  A stdout
        :class:`CategoryLogger` is created when omitted.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CmdlineUtilsError
        Any domain failure; :func:`cli` turns it into a report.
    """
    if logger is None:
        logger = CategoryLogger()

    arguments = list(sys.argv[1:] if argv is None else argv)
    options = AppOptions()
    operands = options.evaluate(arguments)

    if options.verbose.value:
        logger.show_debug = True
    if options.unknown:
        _report_unknown(options.unknown, operands, logger)
    if options.output.value is not None:
        logger.write(f"output goes to {options.output.value}", LoggerCategory.OPTION)

    if options.help.value:
        logger.write(USAGE)
        return exit_codes.SUCCESS

    if options.version.value:
        logger.write(f"{PROG} {__version__}")
        return exit_codes.SUCCESS

    if not operands:
        logger.write(USAGE)
        return exit_codes.SUCCESS

    command, rest = operands[0], operands[1:]
    handlers = {
        "run": _handle_run,
        "cat": _handle_cat,
        "write": _handle_write,
    }

    if command == "doctor":
        return _handle_doctor(logger)

    handler = handlers.get(command)
    if handler is None:
        raise InvalidArgumentsError(
            f"unknown command: {command}",
            hints=[f"run `{PROG} --help` to list the commands"],
        )
    return handler(rest, options, logger)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def report_error(exc: CmdlineUtilsError, logger: CategoryLogger) -> None:
    """Write *exc* and each of its hints to *logger*."""
    logger.write(str(exc), LoggerCategory.ERROR)
    for hint in exc.hints or ():
        logger.write(hint, LoggerCategory.HINT)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    logger = CategoryLogger()
    try:
        code = main(logger=logger)
        sys.exit(code)
    except CmdlineUtilsError as exc:
        report_error(exc, logger)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        logger.write("Aborted by user.", LoggerCategory.INFO)
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.write(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
            LoggerCategory.ERROR,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
