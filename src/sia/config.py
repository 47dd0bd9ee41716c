"""
Sia Driver Configuration
========================

Settings for the ``sia`` compiler driver. Configuration can come from:
- Default values (defined here)
- Environment variables
"""

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

# Program name plus "--source" plus one file
DEFAULT_MINIMUM_ARGUMENT_COUNT = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DriverConfig:
    """
    Configuration for one run of the driver.

    Attributes:
        minimum_argument_count: Smallest accepted argc, program name included
        log_level: Level name for the ``sia`` logger (default: "INFO")
        verbose: Print the parsed arguments before compiling
    """
    minimum_argument_count: int = DEFAULT_MINIMUM_ARGUMENT_COUNT
    log_level: str = "INFO"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "DriverConfig":
        """
        Create DriverConfig from environment variables.

        Environment variables (all optional):
            SIA_MIN_ARGS: Minimum argument count (non-negative integer)
            SIA_LOG_LEVEL: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
            SIA_VERBOSE: "1" to print the parsed arguments

        Invalid values are reported as warnings and the default is kept.
        """
        config = cls()

        if min_args := os.environ.get("SIA_MIN_ARGS"):
            try:
                config.minimum_argument_count = int(min_args)
            except ValueError:
                logger.warning(f"ignoring SIA_MIN_ARGS={min_args!r}: not an integer")
            else:
                if config.minimum_argument_count < 0:
                    logger.warning(f"ignoring SIA_MIN_ARGS={min_args!r}: negative")
                    config.minimum_argument_count = DEFAULT_MINIMUM_ARGUMENT_COUNT

        if log_level := os.environ.get("SIA_LOG_LEVEL"):
            if log_level.upper() in LOG_LEVELS:
                config.log_level = log_level.upper()
            else:
                logger.warning(f"ignoring SIA_LOG_LEVEL={log_level!r}: unknown level")

        if verbose := os.environ.get("SIA_VERBOSE"):
            config.verbose = verbose == "1"

        return config
