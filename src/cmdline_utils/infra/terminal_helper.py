"""Infrastructure: run shell commands and capture what they print.

Commands run through ``/usr/bin/env bash -c`` with stdout and stderr
merged into one pipe, so error messages come back with regular output.
"""

from __future__ import annotations

import subprocess

from cmdline_utils.exceptions import CommandExecutionError

SHELL_LAUNCHER: tuple[str, ...] = ("/usr/bin/env", "bash", "-c")


def execute(command: str, *, wait: bool = True) -> str:
    """Run *command* in bash and return its combined output.

    Parameters
    ----------
    command:
        Shell command line, interpreted by bash.
    wait:
        When ``True`` wait for the process to exit.  Otherwise return
        as soon as the output stream is closed.  The process is polled
        once; if it is still running it is left unreaped and Python may
        emit a ``ResourceWarning`` when the handle is collected.

    Returns
    -------
    str
        Everything the command wrote, or ``""`` if the output is not
        valid UTF-8.

    Raises
    ------
    CommandExecutionError
        If the shell cannot be launched.
    """
    try:
        process = subprocess.Popen(
            [*SHELL_LAUNCHER, command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as exc:
        raise CommandExecutionError(
            f"could not launch shell: {exc}",
            hints=["run `cmdline-utils doctor` to check that bash is installed"],
        ) from exc

    if wait:
        data, _ = process.communicate()
    else:
        data = b""
        if process.stdout is not None:
            data = process.stdout.read()
            process.stdout.close()
        process.poll()

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return ""
