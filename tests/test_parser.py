"""
Tests for the Argument Parser
=============================

Covers recognition of option forms, grouping of values, validation of
names, value types and value counts, the help short-circuit and the
ArgumentParser public surface.

Run tests with:
    pytest tests/test_parser.py -v
"""

import logging

import pytest

from sia.cmdline import (
    ArgumentParser,
    OptionDescription,
    OptionRegistry,
    ParseStatus,
    ValueType,
    parse_arguments,
)
from sia.cmdline.parser import format_help, group_arguments, is_option
from sia.errors import (
    BelowMinimumArgumentCountError,
    InvalidArgumentsError,
    InvalidValueTypeError,
    UnknownOptionError,
    WrongValueCountError,
)


def parse(registry, *args, minimum=0):
    """Parse ``args`` as if given after the program name."""
    return parse_arguments(registry, ["sia", *args], minimum)


def make_registry(*descriptions):
    registry = OptionRegistry()
    for description in descriptions:
        registry.add_option(description)
    return registry


# =============================================================================
# Option Recognition
# =============================================================================

class TestIsOption:
    """Tests for the syntactic option rule."""

    @pytest.mark.parametrize("arg", ["--source", "--ab", "-s", "-5"])
    def test_options(self, arg):
        assert is_option(arg)

    @pytest.mark.parametrize("arg", ["source", "-", "--x", "-ab", "a.sia", ""])
    def test_values(self, arg):
        """Single dashes, three-character long forms and clusters are values."""
        assert not is_option(arg)


# =============================================================================
# Grouping
# =============================================================================

class TestGrouping:
    """Tests for grouping arguments into options and values."""

    def test_long_form(self, registry):
        result = parse(registry, "--source", "a.txt")
        assert result.ok
        assert len(result.options) == 1
        option = result.options[0]
        assert option.name == "source"
        assert option.values == ["a.txt"]

    def test_short_forms_in_first_seen_order(self, registry):
        result = parse(registry, "-s", "a.txt", "-o", "2")
        assert result.ok
        assert [o.name for o in result.options] == ["source", "optimization"]
        assert result.options[0].values == ["a.txt"]
        assert result.options[1].values == ["2"]

    def test_values_keep_order(self, registry):
        result = parse(registry, "--source", "c.sia", "a.sia", "b.sia")
        assert result.get_option("source").values == ["c.sia", "a.sia", "b.sia"]

    def test_option_without_values(self, registry):
        result = parse(registry, "--source")
        assert result.ok
        assert result.get_option("source").values == []

    def test_repeated_option_kept_separately(self, registry):
        """Each occurrence is its own record; lookup returns the first."""
        result = parse(registry, "-s", "a.sia", "-s", "b.sia")
        assert len(result.options) == 2
        assert result.get_option("source").values == ["a.sia"]

    def test_no_arguments(self, registry):
        result = parse(registry)
        assert result.ok
        assert result.options == []

    def test_flag_recorded(self, registry):
        records = group_arguments(registry, ["-s", "a", "--optimization", "1"])
        assert [r.flag for r in records] == ["-s", "--optimization"]

    def test_unresolved_short_hand_is_own_record(self, registry):
        """An unknown short hand does not swallow the next option."""
        records = group_arguments(registry, ["-x", "1", "--source", "a.sia"])
        assert len(records) == 2
        assert records[0].name is None
        assert records[0].flag == "-x"
        assert records[0].values == ["1"]
        assert records[1].values == ["a.sia"]

    def test_leading_values_join_first_option(self, registry):
        """Values before the first option become that option's values."""
        result = parse(registry, "a.sia", "--source", "b.sia")
        assert result.ok
        assert len(result.options) == 1
        assert result.get_option("source").values == ["a.sia", "b.sia"]

    def test_leading_values_checked_against_first_option(self, registry):
        result = parse(registry, "fast", "-o")
        assert [type(e) for e in result.errors] == [InvalidValueTypeError]

    def test_values_without_any_option(self, registry):
        result = parse(registry, "a.sia", "b.sia")
        assert [type(e) for e in result.errors] == [UnknownOptionError]
        assert result.errors[0].message == '"a.sia b.sia" given without any option'


# =============================================================================
# Validation
# =============================================================================

class TestUnknownNames:
    """Tests for unknown option names."""

    def test_unknown_long_option(self, registry):
        """An unknown option fails the parse even if the rest is valid."""
        result = parse(registry, "--source", "a.sia", "--bogus")
        assert result.status is ParseStatus.FAILED
        assert len(result.errors) == 1
        assert isinstance(result.errors[0], UnknownOptionError)
        assert result.errors[0].name == "bogus"

    def test_unknown_short_option(self, registry):
        result = parse(registry, "-x")
        assert result.status is ParseStatus.FAILED
        assert isinstance(result.errors[0], UnknownOptionError)
        assert result.errors[0].flag == "-x"
        assert '"-x" argument name is unknown' in result.errors[0].message

    def test_only_values(self, registry):
        """Values with no option at all are reported as unknown."""
        result = parse(registry, "a.sia", "b.sia")
        assert result.status is ParseStatus.FAILED
        error = result.errors[0]
        assert isinstance(error, UnknownOptionError)
        assert error.name is None
        assert error.values == ["a.sia", "b.sia"]

    def test_all_errors_reported(self, registry, caplog):
        """Every unknown option is logged, not just the first."""
        with caplog.at_level(logging.ERROR, logger="sia"):
            result = parse(registry, "--bogus", "--other", "-q")
        assert len(result.errors) == 3
        assert '"bogus" argument name is unknown' in caplog.text
        assert '"other" argument name is unknown' in caplog.text
        assert '"-q" argument name is unknown' in caplog.text


class TestValueTypes:
    """Tests for value type validation during parsing."""

    def test_integer_accepted(self, registry):
        result = parse(registry, "-o", "42")
        assert result.ok
        assert result.get_option("optimization").get_next_value(ValueType.INTEGER) == 42

    @pytest.mark.parametrize("value", ["12.5", "abc"])
    def test_integer_rejected(self, registry, value):
        """Type errors fail the parse like every other user-input error."""
        result = parse(registry, "-o", value)
        assert result.status is ParseStatus.FAILED
        assert len(result.errors) == 1
        error = result.errors[0]
        assert isinstance(error, InvalidValueTypeError)
        assert error.value == value
        assert error.type_name == "int"

    def test_negative_number_is_a_short_option(self, registry):
        """A negative number has the form of a short option, not a value."""
        result = parse(registry, "-o", "-5")
        kinds = {type(e) for e in result.errors}
        assert kinds == {UnknownOptionError, WrongValueCountError}

    def test_float_and_bool(self):
        registry = make_registry(
            OptionDescription("scale", "factor", ValueType.FLOAT, 1),
            OptionDescription("debug", "switch", ValueType.BOOL, 1),
        )
        assert parse(registry, "--scale", "3.14", "--debug", "1").ok

        result = parse(registry, "--scale", "3.1.4", "--debug", "true")
        assert [type(e) for e in result.errors] == [InvalidValueTypeError] * 2

    def test_each_bad_value_reported(self, registry, caplog):
        with caplog.at_level(logging.ERROR, logger="sia"):
            result = parse(registry, "--optimization", "x", "y")
        type_errors = [e for e in result.errors if isinstance(e, InvalidValueTypeError)]
        assert len(type_errors) == 2
        assert '"x" given value is not of valid value type (int)' in caplog.text


class TestValueCounts:
    """Tests for exact value counts."""

    def test_exact_count(self, registry):
        assert parse(registry, "-o", "1").ok

    def test_too_many(self, registry):
        result = parse(registry, "-o", "1", "2")
        assert result.status is ParseStatus.FAILED
        error = result.errors[0]
        assert isinstance(error, WrongValueCountError)
        assert error.expected == 1
        assert error.actual == 2

    def test_too_few(self, registry):
        result = parse(registry, "-o", "-s", "a.sia")
        assert [type(e) for e in result.errors] == [WrongValueCountError]

    def test_unbounded(self, registry):
        assert parse(registry, "-s").ok
        assert parse(registry, "-s", "a", "b", "c", "d").ok


class TestMinimumArgumentCount:
    """Tests for the minimum argument count."""

    def test_below_minimum(self, registry, caplog):
        """Nothing is grouped or logged when argv is too short."""
        with caplog.at_level(logging.ERROR, logger="sia"):
            result = parse(registry, "--source", minimum=3)
        assert result.status is ParseStatus.FAILED
        assert result.options == []
        assert len(result.errors) == 1
        error = result.errors[0]
        assert isinstance(error, BelowMinimumArgumentCountError)
        assert error.minimum == 3
        assert error.actual == 2
        assert "need atleast 3 argument(s)" in error.message
        assert caplog.records == []

    def test_at_minimum(self, registry):
        assert parse(registry, "--source", "a.sia", minimum=3).ok

    def test_below_minimum_skips_other_checks(self, registry):
        result = parse(registry, "--bogus", minimum=3)
        assert [type(e) for e in result.errors] == [BelowMinimumArgumentCountError]


class TestHelp:
    """Tests for the help short-circuit."""

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help(self, registry, flag):
        result = parse(registry, flag)
        assert result.help_requested
        assert not result.ok

    def test_help_wins_over_errors(self, registry):
        """Help is requested even when other errors were found."""
        result = parse(registry, "--bogus", "-o", "1", "2", "--help")
        assert result.status is ParseStatus.HELP
        kinds = {type(e) for e in result.errors}
        assert kinds == {UnknownOptionError, WrongValueCountError}

    def test_help_with_values(self, registry):
        """Help takes no values but still wins."""
        result = parse(registry, "--help", "extra")
        assert result.help_requested
        assert [type(e) for e in result.errors] == [WrongValueCountError]


class TestRaiseIfErrors:
    """Tests for turning a result into an aggregate exception."""

    def test_ok_does_not_raise(self, registry):
        parse(registry, "-s", "a.sia").raise_if_errors()

    def test_aggregate(self, registry):
        result = parse(registry, "--bogus", "-o", "x")
        with pytest.raises(InvalidArgumentsError) as excinfo:
            result.raise_if_errors()
        report = str(excinfo.value)
        assert '"bogus" argument name is unknown' in report
        assert "invalid arguments were given (2 errors)" in report
        assert len(excinfo.value.errors) == 2


# =============================================================================
# Help Listing
# =============================================================================

class TestHelpListing:
    """Tests for the generated help text."""

    def test_lists_every_option_in_order(self, registry):
        text = format_help(registry)
        assert "List of valid options" in text
        assert text.index("--help") < text.index("--source") < text.index("--optimization")

    def test_type_annotations(self, registry):
        lines = format_help(registry).splitlines()
        help_line = next(line for line in lines if "--help" in line)
        source_line = next(line for line in lines if "--source" in line)
        level_line = next(line for line in lines if "--optimization" in line)

        assert "(" not in help_line
        assert "show this help message" in help_line
        assert "(string) list of sources to compile to one file" in source_line
        assert "(int) optimization level" in level_line
        assert "-o, --optimization" in level_line


# =============================================================================
# ArgumentParser
# =============================================================================

class TestArgumentParser:
    """Tests for the ArgumentParser public surface."""

    def test_help_registered(self):
        parser = ArgumentParser()
        assert [d.name for d in parser.registry] == ["help"]

    def test_get_option(self, parser):
        parser.parse_arguments(["sia", "-s", "a.sia", "-o", "2"])
        assert parser.get_option("source").values == ["a.sia"]
        assert parser.get_option("optimization").get_next_value(ValueType.INTEGER) == 2
        assert parser.get_option("missing") is None

    def test_get_option_before_parse(self, parser):
        assert parser.get_option("source") is None

    def test_found_option_without_values_is_truthy(self, parser):
        """A flag with no values still counts as present."""
        parser.add_option(OptionDescription("verbose", "flag", ValueType.BOOL, 0))
        parser.parse_arguments(["sia", "--verbose", "--source"])
        assert parser.get_option("verbose")
        assert parser.get_option("source")
        assert not parser.get_option("optimization")

    def test_new_parse_replaces_result(self, parser):
        """Results of an earlier parse are discarded, not merged."""
        parser.parse_arguments(["sia", "-s", "a.sia"])
        parser.parse_arguments(["sia", "-o", "1"])
        assert parser.get_option("source") is None
        assert parser.get_option("optimization") is not None

    def test_reset(self, parser):
        parser.parse_arguments(["sia", "-s", "a.sia"])
        parser.reset()
        assert parser.get_option("source") is None
        assert "source" in parser.registry

    def test_minimum_argument_count(self, parser):
        parser.set_minimum_argument_count(3)
        result = parser.parse_arguments(["sia", "-s"])
        assert isinstance(result.errors[0], BelowMinimumArgumentCountError)

    def test_negative_minimum_rejected(self, parser):
        with pytest.raises(ValueError):
            parser.set_minimum_argument_count(-1)

    def test_print_help_message(self, parser, capsys):
        parser.print_help_message()
        out = capsys.readouterr().out
        assert "--source" in out
        assert "(int)" in out

    def test_print_arguments(self, parser, capsys):
        parser.parse_arguments(["sia", "-s", "a.sia", "b.sia", "-o", "3"])
        parser.print_arguments()
        out = capsys.readouterr().out
        assert "source \t : a.sia b.sia" in out
        assert "optimization \t : 3" in out


