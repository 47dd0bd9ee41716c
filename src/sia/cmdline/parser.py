"""
Command-Line Argument Parser
============================

This module turns a raw argument vector into parsed options and checks
them against an OptionRegistry.

Recognition Rules
-----------------
Each argument after the program name is classified as:

| Form       | Rule                                  | Example     |
|------------|---------------------------------------|-------------|
| Long       | starts with "--", longer than 3 chars | --source    |
| Short      | starts with "-", exactly 2 chars      | -s          |
| Value      | anything else                         | main.sia    |

A short form is resolved through the registry's short hands. Values are
attached to the most recent option. Values given before the first option
belong to that option. Values with no option at all form a nameless
record, which is reported as an unknown option.

Validation
----------
After grouping, every record is checked for:

1. an unknown option name
2. values that do not match the option's value type
3. a value count different from the option's exact count

Every problem except a too-short argv is logged as it is found and
collected, so one run reports all of them. If --help (or -h) was given,
the result asks for help even when other errors were found.

Pipeline
--------
    argv → minimum count check → grouping → validation → ParseResult

parse_arguments() is a pure function of the registry and argv. It never
prints the help listing or exits; that decision belongs to the caller
(see sia.cli.sia).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence

import click

from sia.cmdline.option import Option, OptionDescription
from sia.cmdline.registry import OptionRegistry
from sia.errors import (
    ArgumentError,
    ArgumentErrorCollector,
    BelowMinimumArgumentCountError,
    InvalidValueTypeError,
    UnknownOptionError,
    WrongValueCountError,
)

logger = logging.getLogger(__name__)

HELP_OPTION = "help"

HELP_DESCRIPTION = OptionDescription(HELP_OPTION, "show this help message", value_count=0)


# =============================================================================
# Parse Result
# =============================================================================

class ParseStatus(Enum):
    """Outcome of a parse."""
    OK = auto()         # All arguments valid
    HELP = auto()       # --help given; takes priority over errors
    FAILED = auto()     # At least one user-input error


@dataclass
class ParseResult:
    """
    Result of parsing one argument vector.

    Attributes:
        status: Overall outcome
        options: Parsed options in first-seen order (empty when the
                 minimum argument count was not met)
        errors: Every user-input error found, in the order found
    """
    status: ParseStatus = ParseStatus.OK
    options: List[Option] = field(default_factory=list)
    errors: List[ArgumentError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    @property
    def help_requested(self) -> bool:
        return self.status is ParseStatus.HELP

    def get_option(self, name: str) -> Optional[Option]:
        """Return the first parsed option named exactly ``name``, or None."""
        for option in self.options:
            if option.name == name:
                return option
        return None

    def raise_if_errors(self) -> None:
        """Raise an InvalidArgumentsError if any errors were found."""
        collector = ArgumentErrorCollector()
        for error in self.errors:
            collector.add(error)
        collector.raise_if_errors()


# =============================================================================
# Tokenizing
# =============================================================================

def is_option(arg: str) -> bool:
    """Return True if ``arg`` has the syntactic form of an option."""
    if arg.startswith("--") and len(arg) > 3:
        return True
    return arg.startswith("-") and len(arg) == 2


def group_arguments(registry: OptionRegistry, args: Sequence[str]) -> List[Option]:
    """
    Group arguments into options and their values.

    ``args`` excludes the program name. Options keep first-seen order and
    values keep command-line order.
    """
    records: List[Option] = []
    current = Option()

    for arg in args:
        if is_option(arg):
            # Leading values carry into the first option
            if current.flag is not None:
                records.append(current)
                current = Option()

            current.flag = arg
            if len(arg) == 2:
                description = registry.resolve_short_hand(arg[1])
                current.name = description.name if description else None
            else:
                current.name = arg[2:]
        else:
            current.values.append(arg)

    if current.flag is not None or current.has_values:
        records.append(current)

    return records


# =============================================================================
# Validation
# =============================================================================

def _report(collector: ArgumentErrorCollector, error: ArgumentError) -> None:
    logger.error(error.message)
    collector.add(error)


def validate_options(
    registry: OptionRegistry, records: Sequence[Option]
) -> ArgumentErrorCollector:
    """Check every record against the registry and collect the errors."""
    collector = ArgumentErrorCollector()

    for record in records:
        description = registry.find(record.name)
        if description is None:
            _report(collector, UnknownOptionError(record.name, record.flag, record.values))
            continue

        for value in record.values:
            if not description.value_type.accepts(value):
                _report(
                    collector,
                    InvalidValueTypeError(
                        description.name, value, description.value_type.type_name
                    ),
                )

        if not description.takes_values(len(record.values)):
            _report(
                collector,
                WrongValueCountError(
                    description.name, description.value_count, len(record.values)
                ),
            )

    return collector


def parse_arguments(
    registry: OptionRegistry,
    argv: Sequence[str],
    minimum_argument_count: int = 0,
) -> ParseResult:
    """
    Parse an argument vector against a registry.

    Args:
        registry: Accepted options
        argv: Full argument vector; argv[0] is the program name and is skipped
        minimum_argument_count: Smallest accepted len(argv)

    Returns:
        ParseResult describing the parsed options or the errors found

    A too-short argv is returned as an error without being logged, so the
    caller can print the help listing before reporting it.
    """
    if len(argv) < minimum_argument_count:
        error = BelowMinimumArgumentCountError(minimum_argument_count, len(argv))
        return ParseResult(status=ParseStatus.FAILED, errors=[error])

    records = group_arguments(registry, argv[1:])
    collector = validate_options(registry, records)

    if any(record.name == HELP_OPTION for record in records):
        status = ParseStatus.HELP
    elif collector.has_errors():
        status = ParseStatus.FAILED
    else:
        status = ParseStatus.OK

    return ParseResult(status=status, options=records, errors=list(collector.errors))


def format_help(registry: OptionRegistry) -> str:
    """Build the help listing for every registered option."""
    lines = ["", "\tList of valid options :"]
    for description in registry:
        flags = f"-{description.short_hand}, --{description.name}"
        if description.name == HELP_OPTION:
            lines.append(f"\t{flags} \t\t {description.help_string}")
        else:
            lines.append(
                f"\t{flags} \t ({description.value_type.type_name}) {description.help_string}"
            )
    lines.append("")
    return "\n".join(lines)


# =============================================================================
# Argument Parser
# =============================================================================

class ArgumentParser:
    """
    Parses command-line arguments for a tool.

    Only registered options are accepted. The built-in help option is
    registered on construction.

    Example:
        >>> parser = ArgumentParser()
        >>> parser.add_option(OptionDescription("source", "files to compile"))
        >>> result = parser.parse_arguments(["sia", "-s", "main.sia"])
        >>> parser.get_option("source").get_next_value()
        'main.sia'

    Each call to parse_arguments() replaces the previous result.
    """

    def __init__(self) -> None:
        self.registry = OptionRegistry()
        self.minimum_argument_count = 0
        self.result = ParseResult()
        self.add_option(HELP_DESCRIPTION)

    def add_option(self, description: OptionDescription) -> None:
        """Add an option for the parser to accept."""
        self.registry.add_option(description)

    def set_minimum_argument_count(self, n: int) -> None:
        """
        Set the smallest argument count, program name included, that
        parse_arguments() accepts.
        """
        if n < 0:
            raise ValueError(f"minimum argument count must not be negative, got {n}")
        self.minimum_argument_count = n

    def parse_arguments(self, argv: Sequence[str]) -> ParseResult:
        """Parse ``argv`` (program name first) and keep the result."""
        self.result = parse_arguments(self.registry, argv, self.minimum_argument_count)
        return self.result

    def get_option(self, name: str) -> Optional[Option]:
        """Get a parsed option by name, or None if it was not given."""
        return self.result.get_option(name)

    def reset(self) -> None:
        """Discard the parsed options. Registered options are kept."""
        self.result = ParseResult()

    def help_message(self) -> str:
        return format_help(self.registry)

    def print_help_message(self) -> None:
        """Print the help listing for all valid options."""
        click.echo(self.help_message())

    def print_arguments(self) -> None:
        """Print the parsed options and their values."""
        logger.info("Below are detected values")
        for option in self.result.options:
            label = option.name or option.flag or "(null)"
            click.echo(f"\t{label} \t : {' '.join(option.values)}")
