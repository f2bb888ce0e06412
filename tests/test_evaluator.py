"""Tests for the detection and removal helpers (core/evaluator.py).

Coverage:
* ``provided_option`` — absent, single match, conflicting spellings.
* ``remove_all_options`` — prefix stripping, order preservation.
* ``remove`` — multiset-aware removal.
* End-to-end scenarios through a small evaluator.
"""

from __future__ import annotations

import pytest

from cmdline_utils.core.evaluator import provided_option, remove, remove_all_options
from cmdline_utils.core.option import Option
from cmdline_utils.core.protocols import OptionsEvaluator
from cmdline_utils.exceptions import CmdlineUtilsError, InvalidArgumentsError

VERBOSE = frozenset({"-v", "--verbose"})
OUTPUT = frozenset({"-o", "--output"})


# ---------------------------------------------------------------------------
# provided_option
# ---------------------------------------------------------------------------

class TestProvidedOption:
    def test_absent_returns_none(self) -> None:
        assert provided_option(["build", "x"], VERBOSE) is None

    def test_empty_arguments(self) -> None:
        assert provided_option([], VERBOSE) is None

    def test_empty_variations_never_match(self) -> None:
        assert provided_option(["-v"], frozenset()) is None

    @pytest.mark.parametrize(
        "arguments",
        [
            ["-v"],
            ["-v", "build"],
            ["build", "-v"],
            ["a", "-v", "b"],
        ],
    )
    def test_match_is_position_independent(self, arguments: list[str]) -> None:
        assert provided_option(arguments, VERBOSE) == "-v"

    def test_long_spelling(self) -> None:
        assert provided_option(["--verbose"], VERBOSE) == "--verbose"

    def test_repeated_same_variation_is_not_a_conflict(self) -> None:
        assert provided_option(["-v", "-v"], VERBOSE) == "-v"

    def test_distinct_variations_conflict(self) -> None:
        with pytest.raises(InvalidArgumentsError):
            provided_option(["-v", "--verbose"], VERBOSE)

    def test_conflict_even_with_repeats(self) -> None:
        with pytest.raises(InvalidArgumentsError):
            provided_option(["-v", "-v", "--verbose"], VERBOSE)

    def test_conflict_hints_name_the_option(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            provided_option(["--verbose", "-v"], VERBOSE)
        hints = exc_info.value.hints
        assert hints is not None
        assert "{--verbose, -v}" in hints[0]
        assert "too many variations" in hints[0]

    def test_conflict_error_is_a_domain_error(self) -> None:
        with pytest.raises(CmdlineUtilsError):
            provided_option(["-v", "--verbose"], VERBOSE)

    def test_accepts_any_iterable_of_variations(self) -> None:
        assert provided_option(["--verbose"], ["-v", "--verbose"]) == "--verbose"

    def test_does_not_modify_arguments(self) -> None:
        arguments = ["build", "-v"]
        provided_option(arguments, VERBOSE)
        assert arguments == ["build", "-v"]

    def test_tokens_of_other_options_are_ignored(self) -> None:
        assert provided_option(["-o", "out", "-v"], OUTPUT) == "-o"


# ---------------------------------------------------------------------------
# remove_all_options
# ---------------------------------------------------------------------------

class TestRemoveAllOptions:
    def test_strips_flags_and_keeps_order(self) -> None:
        assert remove_all_options(["-v", "build", "-o", "out"]) == ["build", "out"]

    def test_strips_unknown_flags(self) -> None:
        assert remove_all_options(["--whatever", "x", "-z"]) == ["x"]

    def test_modifies_in_place(self) -> None:
        arguments = ["a", "-v", "b"]
        result = remove_all_options(arguments)
        assert result is arguments
        assert arguments == ["a", "b"]

    def test_no_flags_is_a_no_op(self) -> None:
        assert remove_all_options(["a", "b"]) == ["a", "b"]

    def test_custom_prefix(self) -> None:
        assert remove_all_options(["/v", "-x", "a"], prefix="/") == ["-x", "a"]


# ---------------------------------------------------------------------------
# remove
# ---------------------------------------------------------------------------

class TestRemove:
    def test_removes_every_occurrence(self) -> None:
        assert remove(["-v"], ["-v", "x", "-v"]) == ["x"]

    def test_removes_several_tokens(self) -> None:
        assert remove(["-o", "out"], ["build", "-o", "out", "now"]) == ["build", "now"]

    def test_missing_tokens_are_ignored(self) -> None:
        assert remove(["-q"], ["a", "b"]) == ["a", "b"]

    def test_modifies_in_place(self) -> None:
        arguments = ["-v", "x"]
        result = remove(["-v"], arguments)
        assert result is arguments
        assert arguments == ["x"]


# ---------------------------------------------------------------------------
# End-to-end through a minimal evaluator
# ---------------------------------------------------------------------------

class _BuildOptions:
    def __init__(self) -> None:
        self.verbose = Option(False, "-v", "--verbose")
        self.output: Option[str | None] = Option.nullable("-o", "--output")

    def evaluate(self, arguments: list[str]) -> list[str]:
        if variation := provided_option(arguments, self.verbose.variations):
            self.verbose.value = True
            remove([variation], arguments)
        if variation := provided_option(arguments, self.output.variations):
            value = arguments[arguments.index(variation) + 1]
            self.output.value = value
            remove([variation, value], arguments)
        return arguments


class TestScenarios:
    def test_satisfies_protocol(self) -> None:
        evaluator: OptionsEvaluator = _BuildOptions()
        assert evaluator.evaluate([]) == []

    def test_single_variation_matches(self) -> None:
        assert provided_option(["build", "-v"], VERBOSE) == "-v"

    def test_two_variations_fail(self) -> None:
        with pytest.raises(InvalidArgumentsError):
            provided_option(["build", "-v", "--verbose"], VERBOSE)

    def test_absent_leaves_arguments_unchanged(self) -> None:
        arguments = ["build"]
        assert provided_option(arguments, OUTPUT) is None
        assert arguments == ["build"]

    def test_evaluate_sets_values_and_strips_tokens(self) -> None:
        options = _BuildOptions()
        remaining = options.evaluate(["build", "--verbose", "-o", "dist", "src"])
        assert remaining == ["build", "src"]
        assert options.verbose.value is True
        assert options.output.value == "dist"

    def test_unmatched_option_keeps_initial_value(self) -> None:
        options = _BuildOptions()
        options.evaluate(["build"])
        assert options.verbose.value is False
        assert options.output.value is None

    def test_evaluate_propagates_conflicts(self) -> None:
        options = _BuildOptions()
        with pytest.raises(InvalidArgumentsError):
            options.evaluate(["-v", "--verbose"])
        assert options.verbose.value is False
