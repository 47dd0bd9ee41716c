"""
Sia - Compiler Front End
========================

This package provides the front end of the Sia compiler. Its engineered
part is the command-line option parser that the driver is built on.

Main Components
---------------
- **cmdline**: option registry, argument parser and value validation
- **reader**: character-level source file reader used by the lexer
- **cli**: the ``sia`` compiler driver

Quick Start
-----------
Parse a command line:
    >>> from sia.cmdline import ArgumentParser, OptionDescription, ValueType
    >>> parser = ArgumentParser()
    >>> parser.add_option(OptionDescription("source", "sources to compile"))
    >>> result = parser.parse_arguments(["sia", "--source", "main.sia"])
    >>> result.ok
    True
    >>> parser.get_option("source").values
    ['main.sia']

Or use the command-line driver:
    $ sia --source main.sia -o 2

Version History
---------------
1.0.0 - Option parser and driver skeleton
"""

__version__ = "1.0.0"
__author__ = "Siddharth Mishra & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from sia.cmdline import (
    UNBOUNDED,
    ArgumentParser,
    Option,
    OptionDescription,
    OptionRegistry,
    ParseResult,
    ParseStatus,
    ValueType,
    parse_arguments,
)
from sia.errors import (
    SiaError,
    ArgumentError,
    BelowMinimumArgumentCountError,
    UnknownOptionError,
    InvalidValueTypeError,
    WrongValueCountError,
    MissingRequiredOptionError,
    InvalidArgumentsError,
    UnregisteredOptionError,
    ArgumentErrorCollector,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Option parsing
    "UNBOUNDED",
    "ArgumentParser",
    "Option",
    "OptionDescription",
    "OptionRegistry",
    "ParseResult",
    "ParseStatus",
    "ValueType",
    "parse_arguments",
    # Exception hierarchy
    "SiaError",
    "ArgumentError",
    "BelowMinimumArgumentCountError",
    "UnknownOptionError",
    "InvalidValueTypeError",
    "WrongValueCountError",
    "MissingRequiredOptionError",
    "InvalidArgumentsError",
    "UnregisteredOptionError",
    "ArgumentErrorCollector",
]
