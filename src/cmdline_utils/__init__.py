"""cmdline-utils — building blocks for small command-line applications.

Declarative options with conflict-checked evaluation, file and shell
helpers, and a categorized console logger.
"""

from cmdline_utils.core.evaluator import provided_option, remove, remove_all_options
from cmdline_utils.core.option import Option, OptionVariations
from cmdline_utils.core.protocols import Logger, OptionsEvaluator
from cmdline_utils.exceptions import InvalidArgumentsError
from cmdline_utils.version import __version__

__all__: list[str] = [
    "InvalidArgumentsError",
    "Logger",
    "Option",
    "OptionVariations",
    "OptionsEvaluator",
    "__version__",
    "provided_option",
    "remove",
    "remove_all_options",
]
