"""
Sia Error Hierarchy
===================

This module defines the exception hierarchy for the Sia compiler front end.
All exceptions inherit from SiaError, allowing callers to catch every
front-end error with a single except clause if desired.

Exception Hierarchy
-------------------
SiaError (base)
├── ArgumentError (user input on the command line)
│   ├── BelowMinimumArgumentCountError - too few arguments given
│   ├── UnknownOptionError - option name not registered
│   ├── InvalidValueTypeError - value does not match the option's type
│   ├── WrongValueCountError - option got the wrong number of values
│   ├── MissingRequiredOptionError - driver needs an option that is absent
│   └── InvalidArgumentsError - aggregate report of the errors above
└── UnregisteredOptionError - lookup of a name that was never registered

Design Philosophy
-----------------
User-input errors are values first: the parser collects them so that a
single run reports every problem on the command line. Only the driver
turns them into an exit status. UnregisteredOptionError is different: it
signals a programming mistake in the caller, so it is raised immediately
and is deliberately not an ArgumentError.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class SiaError(Exception):
    """
    Base exception for all Sia errors.

        try:
            result.raise_if_errors()
        except SiaError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Command-Line Argument Errors
# =============================================================================

class ArgumentError(SiaError):
    """
    Base exception for invalid command-line input.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


class BelowMinimumArgumentCountError(ArgumentError):
    """
    Fewer arguments than the configured minimum were given.

    The count includes the program name, matching argc.
    """

    def __init__(self, minimum: int, actual: int):
        self.minimum = minimum
        self.actual = actual
        super().__init__(
            f"need atleast {minimum} argument(s) : {actual} given",
            hint="run with --help to list the valid options",
        )


class UnknownOptionError(ArgumentError):
    """
    Option name that does not match any registered description.

    Raised for unknown long names, for short hands that resolve to no
    description, and for values that appear before any option at all.
    In the last case ``name`` is None and ``values`` holds the stray values.
    """

    def __init__(
        self,
        name: Optional[str],
        flag: Optional[str] = None,
        values: Optional[List[str]] = None,
    ):
        self.name = name
        self.flag = flag
        self.values = values or []

        if name is not None:
            message = f'"{name}" argument name is unknown'
        elif flag is not None:
            message = f'"{flag}" argument name is unknown'
        else:
            stray = " ".join(self.values)
            message = f'"{stray}" given without any option'

        super().__init__(message)


class InvalidValueTypeError(ArgumentError):
    """Value string that does not match the option's declared value type."""

    def __init__(self, option_name: str, value: str, type_name: str):
        self.option_name = option_name
        self.value = value
        self.type_name = type_name
        super().__init__(
            f'"{value}" given value is not of valid value type ({type_name})',
            hint=f'"--{option_name}" expects {type_name} values',
        )


class WrongValueCountError(ArgumentError):
    """Option given a number of values different from its exact count."""

    def __init__(self, option_name: str, expected: int, actual: int):
        self.option_name = option_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'"{option_name}" option takes only {expected} argument(s) : {actual} given'
        )


class MissingRequiredOptionError(ArgumentError):
    """
    An option the driver cannot work without was not given.

    This is raised by callers of the parser, never by the parser itself,
    since the registry has no notion of required options.
    """

    def __init__(self, option_name: str, message: Optional[str] = None):
        self.option_name = option_name
        super().__init__(message or f'"--{option_name}" option is required')


class InvalidArgumentsError(ArgumentError):
    """
    Aggregate of every user-input error found in one parse.

    The message is the formatted report from ArgumentErrorCollector and
    is passed through untouched.
    """

    def __init__(self, report: str, errors: Optional[List[ArgumentError]] = None):
        self.errors = errors or []
        super().__init__(report)

    def _format_message(self) -> str:
        return self.message


# =============================================================================
# Internal Usage Errors
# =============================================================================

class UnregisteredOptionError(SiaError):
    """
    Description lookup for a name that was never registered.

    This is a bug in the calling code (for example querying a registry that
    is not the one the arguments were parsed against), not bad user input.
    """

    def __init__(self, name: Optional[str]):
        self.name = name
        super().__init__(
            f"failed to find queried option ({name}): option not in option descriptions"
        )


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ArgumentErrorCollector:
    """
    Collects user-input errors for batch reporting.

    The parser keeps validating after the first problem so the user sees
    every mistake on the command line in a single run.

    Example:
        collector = ArgumentErrorCollector()
        for record in records:
            if not known(record):
                collector.add(UnknownOptionError(record.name))
        collector.raise_if_errors()
    """

    def __init__(self) -> None:
        self.errors: List[ArgumentError] = []

    def add(self, error: ArgumentError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format all errors followed by a summary line."""
        lines = [error.message for error in self.errors]
        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"invalid arguments were given ({len(self.errors)} {error_word})")
        return "\n".join(lines)

    def clear(self) -> None:
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise an InvalidArgumentsError if any errors were collected."""
        if self.has_errors():
            raise InvalidArgumentsError(self.report(), list(self.errors))
