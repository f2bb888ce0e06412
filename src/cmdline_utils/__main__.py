"""Allow ``python -m cmdline_utils`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cmdline_utils`` behaves identically to the ``cmdline-utils``
console script.
"""

from __future__ import annotations

from cmdline_utils.cli.app import cli

if __name__ == "__main__":
    cli()
