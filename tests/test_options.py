"""Tests for the argument interpreter (core/options.py).

The file checker is faked, so there is no filesystem access.

Coverage:
* Defaults with two or three positionals.
* Every option, in ``-name=value``, ``-name value`` and ``--name`` forms.
* Help / version short-circuits and unknown-option outcomes.
* Positional arity and the model → old → test check order.
* Validation errors carry the offending value.
"""

from __future__ import annotations

from typing import Any

import pytest

from slim_predict.core.models import (
    HelpRequested,
    InputFormat,
    Parsed,
    PositionalCountMismatch,
    PredictConfig,
    UnknownOption,
    VersionRequested,
)
from slim_predict.core.options import (
    INPUT_FORMATS,
    OPTIONS,
    interpret,
    parse,
    parse_input_format,
    parse_non_negative,
    preview_debug_level,
)
from slim_predict.exceptions import (
    InputFileNotFoundError,
    InvalidInputFormatError,
    InvalidIntegerError,
    NegativeParameterError,
    UsageError,
)


def _config(args: list[str], checker: Any) -> PredictConfig:
    outcome = interpret(args, file_checker=checker)
    assert isinstance(outcome, Parsed), outcome
    return outcome.config


# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

class TestTables:
    def test_option_names(self) -> None:
        assert set(OPTIONS) == {
            "ifmt", "binarize", "outfile", "nrcmds", "dbglvl", "help", "version",
        }

    def test_value_options(self) -> None:
        takes_value = {name for name, spec in OPTIONS.items() if spec.takes_value}
        assert takes_value == {"ifmt", "outfile", "nrcmds", "dbglvl"}

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            INPUT_FORMATS["csv"] = (InputFormat.CSR, True)  # type: ignore[index]


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_two_positionals(self, checker: Any) -> None:
        config = _config(["model.bin", "old.csr"], checker)
        assert config == PredictConfig(
            model_path="model.bin",
            reference_data_path="old.csr",
        )

    def test_three_positionals(self, checker: Any) -> None:
        config = _config(["model.bin", "old.csr", "test.csr"], checker)
        assert config == PredictConfig(
            model_path="model.bin",
            reference_data_path="old.csr",
            test_data_path="test.csr",
        )


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestInputFormatOption:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("csr", InputFormat.CSR),
            ("cluto", InputFormat.CLUTO),
            ("ijv", InputFormat.IJV),
        ],
    )
    def test_formats_read_values(
        self, checker: Any, name: str, expected: InputFormat
    ) -> None:
        config = _config([f"-ifmt={name}", "model.bin", "old.csr"], checker)
        assert config.input_format is expected
        assert config.read_values is True

    def test_csrnv_is_csr_without_values(self, checker: Any) -> None:
        config = _config(["-ifmt=csrnv", "model.bin", "old.csr"], checker)
        assert config.input_format is InputFormat.CSR
        assert config.read_values is False

    def test_separate_value_form(self, checker: Any) -> None:
        config = _config(["-ifmt", "ijv", "model.bin", "old.csr"], checker)
        assert config.input_format is InputFormat.IJV

    def test_invalid_format_raises(self, checker: Any) -> None:
        with pytest.raises(InvalidInputFormatError, match="bogus") as exc_info:
            interpret(["-ifmt=bogus", "model.bin", "old.csr"], file_checker=checker)
        assert exc_info.value.value == "bogus"
        assert checker.calls == []

    def test_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(InvalidInputFormatError):
            parse_input_format("CSR")


class TestFlagAndPathOptions:
    def test_binarize(self, checker: Any) -> None:
        assert _config(["-binarize", "model.bin", "old.csr"], checker).binarize

    def test_double_dash_spelling(self, checker: Any) -> None:
        assert _config(["--binarize", "model.bin", "old.csr"], checker).binarize

    def test_outfile(self, checker: Any) -> None:
        config = _config(["-outfile=preds.txt", "model.bin", "old.csr"], checker)
        assert config.output_path == "preds.txt"
        assert config.produces_output

    def test_empty_outfile_means_no_output(self, checker: Any) -> None:
        config = _config(["-outfile=", "model.bin", "old.csr"], checker)
        assert config.output_path is None
        assert config.produces_output is False

    def test_detached_value_may_start_with_dash(self, checker: Any) -> None:
        config = _config(["-outfile", "-x.txt", "model.bin", "old.csr"], checker)
        assert config.output_path == "-x.txt"

    def test_detached_value_may_be_double_dash(self, checker: Any) -> None:
        config = _config(["-outfile", "--", "model.bin", "old.csr"], checker)
        assert config.output_path == "--"

    def test_abbreviated_option_takes_detached_value(self, checker: Any) -> None:
        config = _config(["-out", "-x.txt", "model.bin", "old.csr"], checker)
        assert config.output_path == "-x.txt"

    def test_options_after_positionals(self, checker: Any) -> None:
        config = _config(["model.bin", "old.csr", "-binarize", "-nrcmds=3"], checker)
        assert config.binarize
        assert config.num_recommendations == 3

    def test_full_invocation(self, checker: Any) -> None:
        config = _config(
            [
                "-outfile=preds.txt",
                "-binarize",
                "-nrcmds=5",
                "model.bin",
                "old.csr",
                "test.csr",
            ],
            checker,
        )
        assert config.output_path == "preds.txt"
        assert config.binarize is True
        assert config.num_recommendations == 5
        assert config.model_path == "model.bin"
        assert config.reference_data_path == "old.csr"
        assert config.test_data_path == "test.csr"


class TestNumericOptions:
    def test_nrcmds(self, checker: Any) -> None:
        assert _config(["-nrcmds=25", "model.bin", "old.csr"], checker).num_recommendations == 25

    def test_dbglvl(self, checker: Any) -> None:
        assert _config(["--dbglvl=3", "model.bin", "old.csr"], checker).debug_level == 3

    def test_zero_is_allowed(self, checker: Any) -> None:
        config = _config(["-nrcmds=0", "-dbglvl=0", "model.bin", "old.csr"], checker)
        assert config.num_recommendations == 0
        assert config.debug_level == 0

    def test_last_occurrence_wins(self, checker: Any) -> None:
        config = _config(["-nrcmds=3", "-nrcmds=7", "model.bin", "old.csr"], checker)
        assert config.num_recommendations == 7

    @pytest.mark.parametrize("option", ["nrcmds", "dbglvl"])
    def test_negative_raises(self, checker: Any, option: str) -> None:
        with pytest.raises(
            NegativeParameterError,
            match=f"The -{option} parameter should be non-negative.",
        ):
            interpret([f"-{option}=-1", "model.bin", "old.csr"], file_checker=checker)

    def test_negative_in_separate_form(self, checker: Any) -> None:
        with pytest.raises(NegativeParameterError):
            interpret(["-nrcmds", "-1", "model.bin", "old.csr"], file_checker=checker)

    @pytest.mark.parametrize("value", ["1_0", " 5", "\u0663", "5.0", ""])
    def test_only_ascii_digits_are_integers(self, checker: Any, value: str) -> None:
        with pytest.raises(InvalidIntegerError):
            interpret([f"-nrcmds={value}", "model.bin", "old.csr"], file_checker=checker)

    def test_explicit_plus_sign(self) -> None:
        assert parse_non_negative("nrcmds", "+7") == 7

    def test_non_integer_raises(self, checker: Any) -> None:
        with pytest.raises(InvalidIntegerError, match="abc") as exc_info:
            interpret(["-dbglvl=abc", "model.bin", "old.csr"], file_checker=checker)
        assert exc_info.value.option == "dbglvl"

    def test_validation_follows_command_line_order(self, checker: Any) -> None:
        with pytest.raises(NegativeParameterError):
            interpret(
                ["-nrcmds=-1", "-ifmt=bogus", "model.bin", "old.csr"],
                file_checker=checker,
            )
        with pytest.raises(InvalidInputFormatError):
            interpret(
                ["-ifmt=bogus", "-nrcmds=-1", "model.bin", "old.csr"],
                file_checker=checker,
            )

    def test_parse_non_negative_returns_int(self) -> None:
        assert parse_non_negative("nrcmds", "42") == 42


# ---------------------------------------------------------------------------
# Help, version and unknown options
# ---------------------------------------------------------------------------

class TestShortCircuits:
    def test_help_alone(self, checker: Any) -> None:
        assert interpret(["-help"], file_checker=checker) == HelpRequested()

    def test_help_anywhere_skips_file_checks(self, make_checker: Any) -> None:
        empty = make_checker()
        outcome = interpret(
            ["-nrcmds=5", "model.bin", "old.csr", "-help"],
            file_checker=empty,
        )
        assert outcome == HelpRequested()
        assert empty.calls == []

    def test_version(self, checker: Any) -> None:
        assert interpret(["-version"], file_checker=checker) == VersionRequested()

    def test_unknown_option(self, checker: Any) -> None:
        outcome = interpret(["-foo", "model.bin", "old.csr"], file_checker=checker)
        assert isinstance(outcome, UnknownOption)
        assert "-foo" in outcome.message

    def test_missing_value(self, checker: Any) -> None:
        outcome = interpret(["model.bin", "old.csr", "-outfile"], file_checker=checker)
        assert isinstance(outcome, UnknownOption)

    def test_unknown_option_is_not_help(self, checker: Any) -> None:
        outcome = interpret(["-foo"], file_checker=checker)
        assert outcome != HelpRequested()


# ---------------------------------------------------------------------------
# Positionals
# ---------------------------------------------------------------------------

class TestPositionals:
    @pytest.mark.parametrize(
        "args",
        [
            [],
            ["model.bin"],
            ["model.bin", "old.csr", "test.csr", "extra"],
            ["-binarize", "-nrcmds=4"],
        ],
    )
    def test_count_out_of_range(self, checker: Any, args: list[str]) -> None:
        outcome = interpret(args, file_checker=checker)
        assert isinstance(outcome, PositionalCountMismatch)
        assert checker.calls == []

    def test_count_is_reported(self, checker: Any) -> None:
        outcome = interpret(["a", "b", "c", "d", "e"], file_checker=checker)
        assert outcome == PositionalCountMismatch(count=5)

    def test_missing_model_is_checked_first(self, make_checker: Any) -> None:
        only_old = make_checker({"old.csr", "test.csr"})
        with pytest.raises(
            InputFileNotFoundError,
            match="Input model file nope.bin does not exist.",
        ) as exc_info:
            interpret(["nope.bin", "old.csr", "test.csr"], file_checker=only_old)
        assert exc_info.value.role == "model"
        assert only_old.calls == ["nope.bin"]

    def test_missing_old_file(self, make_checker: Any) -> None:
        only_model = make_checker({"model.bin"})
        with pytest.raises(InputFileNotFoundError, match="Input old file old.csr"):
            interpret(["model.bin", "old.csr"], file_checker=only_model)
        assert only_model.calls == ["model.bin", "old.csr"]

    def test_missing_test_file(self, make_checker: Any) -> None:
        no_test = make_checker({"model.bin", "old.csr"})
        with pytest.raises(InputFileNotFoundError, match="Input test file test.csr"):
            interpret(["model.bin", "old.csr", "test.csr"], file_checker=no_test)

    def test_double_dash_ends_option_scanning(self, make_checker: Any) -> None:
        dashed = make_checker({"-weird", "o"})
        config = _config(["--", "-weird", "o"], dashed)
        assert config.model_path == "-weird"
        assert config.reference_data_path == "o"

    def test_options_before_double_dash_still_apply(self, make_checker: Any) -> None:
        dashed = make_checker({"m", "-old", "-help"})
        config = _config(["-binarize", "m", "--", "-old", "-help"], dashed)
        assert config.binarize
        assert config.reference_data_path == "-old"
        assert config.test_data_path == "-help"


# ---------------------------------------------------------------------------
# parse() convenience wrapper
# ---------------------------------------------------------------------------

class TestParse:
    def test_returns_config(self, checker: Any) -> None:
        config = parse(["model.bin", "old.csr"], file_checker=checker)
        assert config.model_path == "model.bin"

    def test_non_config_outcome_raises(self, checker: Any) -> None:
        with pytest.raises(UsageError) as exc_info:
            parse(["model.bin"], file_checker=checker)
        assert exc_info.value.outcome == PositionalCountMismatch(count=1)


# ---------------------------------------------------------------------------
# Debug level preview
# ---------------------------------------------------------------------------

class TestPreviewDebugLevel:
    def test_reads_last_valid_value(self) -> None:
        assert preview_debug_level(["-dbglvl=1", "m", "o", "-dbglvl", "3"]) == 3

    def test_defaults_to_zero(self) -> None:
        assert preview_debug_level(["m", "o"]) == 0

    @pytest.mark.parametrize(
        "args",
        [
            ["-dbglvl=abc", "m", "o"],
            ["-dbglvl=-2", "m", "o"],
            ["-bogus", "-dbglvl=4"],
        ],
    )
    def test_tolerates_bad_arguments(self, args: list[str]) -> None:
        assert preview_debug_level(args) == 0
