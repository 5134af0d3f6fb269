"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    PARSE_ERROR = 1
    NOT_EQUAL = 3
    NO_MATCH = 4


class OutputFormats(Enum):
    """Output formats supported by the CLI.

    Args:
        Enum (string): Output formats supported by the CLI.
    """

    JSON = "json"
    TEXT = "text"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    CANARY = "canary"
    LATEST = "latest"
    OR_SEPARATOR = "||"
    AND_SEPARATOR = " "
    REQ_PREFIXES = ["=", "^", "~", ">", "<", "*"]
    PARTIAL_VERSION_PREFIX = "~"

    OUTPUT_FORMATS = [OutputFormats.JSON.value, OutputFormats.TEXT.value]
    DEFAULT_OUTPUT_FORMAT = OutputFormats.TEXT.value
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    DEFAULT_LOG_LEVEL = "INFO"
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    ENV_LOG_LEVEL = "PLUGINKIT_LOG_LEVEL"
    ENV_CONFIG = "PLUGINKIT_CONFIG"
    CONFIG_FILE = "pluginkit.yml"
