"""Core layer — option declarations and argument evaluation.

Rules
-----
* No ``print()`` calls.
* No filesystem or subprocess I/O.
* No imports from ``cli`` or ``infra``.
* All functions are fully typed and deterministic.
"""

from cmdline_utils.core.evaluator import (
    OPTION_PREFIX,
    provided_option,
    remove,
    remove_all_options,
)
from cmdline_utils.core.option import Option, OptionVariations
from cmdline_utils.core.protocols import Logger, OptionsEvaluator

__all__: list[str] = [
    "OPTION_PREFIX",
    "Logger",
    "Option",
    "OptionVariations",
    "OptionsEvaluator",
    "provided_option",
    "remove",
    "remove_all_options",
]
