"""
Sia Command-Line Option Parsing
===============================

This package implements the option parser used by the Sia driver:

- **option**: value types, option descriptions and parsed options
- **registry**: the ordered set of accepted option descriptions
- **parser**: grouping of argv into options, validation and help text

Usage
-----
>>> from sia.cmdline import ArgumentParser, OptionDescription, ValueType
>>> parser = ArgumentParser()
>>> parser.add_option(OptionDescription("optimization", "level", ValueType.INTEGER, 1))
>>> result = parser.parse_arguments(["sia", "-o", "2"])
>>> result.ok
True
>>> parser.get_option("optimization").get_next_value(ValueType.INTEGER)
2
"""

from sia.cmdline.option import (
    UNBOUNDED,
    Option,
    OptionDescription,
    ValueType,
)
from sia.cmdline.registry import OptionRegistry
from sia.cmdline.parser import (
    HELP_OPTION,
    ArgumentParser,
    ParseResult,
    ParseStatus,
    format_help,
    parse_arguments,
)

__all__ = [
    "UNBOUNDED",
    "Option",
    "OptionDescription",
    "ValueType",
    "OptionRegistry",
    "HELP_OPTION",
    "ArgumentParser",
    "ParseResult",
    "ParseStatus",
    "format_help",
    "parse_arguments",
]
