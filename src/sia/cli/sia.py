"""
sia - Sia Compiler Driver
=========================

Command-line entry point of the Sia compiler front end.

Usage Examples
--------------
Compile one source:
    $ sia --source main.sia

Several sources with an optimization level, using short hands:
    $ sia -s main.sia util.sia -o 2

List the valid options:
    $ sia --help

Exit Status
-----------
- 0: compiled, or help was shown
- 2: invalid arguments, no sources given, or a source file is missing
- 3: internal error

Environment
-----------
SIA_MIN_ARGS, SIA_LOG_LEVEL and SIA_VERBOSE, see sia.config.
"""

import logging
import sys
from typing import Tuple

import click

from sia import __version__
from sia.cli.errors import ExitCode, handle_cli_exception
from sia.cmdline import ArgumentParser, OptionDescription, ValueType
from sia.config import DriverConfig
from sia.errors import BelowMinimumArgumentCountError, MissingRequiredOptionError
from sia.log import setup_logging
from sia.reader import lex_file

logger = logging.getLogger(__name__)


def build_parser(config: DriverConfig) -> ArgumentParser:
    """Create the argument parser with the options the driver accepts."""
    parser = ArgumentParser()
    parser.add_option(OptionDescription(
        "source", "list of sources to compile to one file",
    ))
    parser.add_option(OptionDescription(
        "optimization", "optimization level to be used in optimization stage",
        ValueType.INTEGER, 1,
    ))
    parser.set_minimum_argument_count(config.minimum_argument_count)
    return parser


def compile_sources(parser: ArgumentParser) -> int:
    """
    Run the front end over every source given on the command line.

    Returns:
        Total number of characters read

    Raises:
        MissingRequiredOptionError: if no sources were given
    """
    sources = parser.get_option("source")
    if sources is None or not sources.has_values:
        raise MissingRequiredOptionError(
            "source", "no sources were provided to compile"
        )

    optimization = parser.get_option("optimization")
    if optimization is not None:
        description = parser.registry.get_option_description("optimization")
        level = optimization.get_next_value(description.value_type)
        logger.debug(f"optimization level {level}")

    total = 0
    while (filename := sources.get_next_value()) is not None:
        total += lex_file(filename)
    return total


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.version_option(version=__version__, prog_name="sia")
@click.pass_context
def main(ctx: click.Context, args: Tuple[str, ...]) -> None:
    """
    Compile Sia sources.

    The arguments are parsed by the Sia option parser; run with --help
    to list the valid options.
    """
    # Installed before reading the environment so its warnings are shown
    sia_logger = setup_logging()
    config = DriverConfig.from_env()
    sia_logger.setLevel(config.log_level)

    parser = build_parser(config)
    result = parser.parse_arguments([ctx.info_name or "sia", *args])

    if result.help_requested:
        parser.print_help_message()
        sys.exit(ExitCode.SUCCESS)

    if not result.ok:
        parser.print_help_message()
        for error in result.errors:
            if isinstance(error, BelowMinimumArgumentCountError):
                logger.error(error.message)
        logger.error("invalid arguments were given")
        sys.exit(ExitCode.INVALID_ARGS)

    if config.verbose:
        parser.print_arguments()

    try:
        compile_sources(parser)
    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


if __name__ == "__main__":
    main()
