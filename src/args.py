"""Argument parsing functionality for the pluginkit version inspector."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="pluginkit-version",
        description=(
            "Parse, normalize and compare tool version specifications"
        ),
        add_help=True,
    )

    parser.add_argument("specs",
                        metavar="SPEC",
                        help="Version, alias, or requirement, i.e: 1.2.3, latest, ^1.2 || ~2",
                        nargs="+",
                        type=str)

    parser.add_argument("--resolved",
                        dest="RESOLVED",
                        help="Parse as resolved specifications (exact version, alias, or canary only)",
                        action="store_true")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--compare",
                        dest="COMPARE",
                        help="Exit with a non-zero status code unless all specifications are equal",
                        action="store_true")
    mode_group.add_argument("-m", "--match",
                        dest="MATCH",
                        help="Check whether each specification accepts this exact version",
                        action="store",
                        type=str)

    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or text). Defaults to the config file value, then text.",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
