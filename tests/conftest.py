"""
Shared fixtures for the Sia test suite.
"""

import pytest

from sia.cmdline import ArgumentParser, OptionDescription, OptionRegistry, ValueType
from sia.cmdline.parser import HELP_DESCRIPTION


@pytest.fixture
def registry():
    """Registry shaped like the driver's: help, source and optimization."""
    registry = OptionRegistry()
    registry.add_option(HELP_DESCRIPTION)
    registry.add_option(OptionDescription("source", "list of sources to compile to one file"))
    registry.add_option(OptionDescription(
        "optimization", "optimization level", ValueType.INTEGER, 1,
    ))
    return registry


@pytest.fixture
def parser():
    """ArgumentParser with source and optimization registered."""
    parser = ArgumentParser()
    parser.add_option(OptionDescription("source", "list of sources to compile to one file"))
    parser.add_option(OptionDescription(
        "optimization", "optimization level", ValueType.INTEGER, 1,
    ))
    return parser
