"""pluginkit-version - inspect tool version specifications

Parses each SPEC the way plugin functions do before handing it to the
host for resolution, and reports the variant and canonical form.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from constants import Constants, ExitCodes, OutputFormats
from common.config import find_config_path, load_config
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from errors import OperationError, VersionParseError
from args import parse_args
from versioning import ResolvedVersionSpec, UnresolvedVersionSpec

logger = logging.getLogger(__name__)


def inspect_spec(raw, resolved=False, match=None):
    """Parse a single specification into a report record.

    Args:
        raw (str): Specification as given on the command line.
        resolved (bool): Use the resolved parser instead of the unresolved one.
        match (str, optional): Exact version to test against the specification.

    Returns:
        dict: Report record; ``error`` is set when parsing or matching failed.
    """
    parser = ResolvedVersionSpec if resolved else UnresolvedVersionSpec
    result = parser.try_parse(raw)
    record = {
        "input": raw,
        "kind": None,
        "spec": None,
        "error": None,
    }
    if not result.ok:
        record["error"] = str(result.error)
        return record

    spec = result.spec
    record["kind"] = spec.kind.value
    record["spec"] = spec.to_json()

    if match is not None:
        target = spec if not resolved else spec.to_unresolved_spec()
        try:
            record["matches"] = target.matches(match)
        except (OperationError, VersionParseError) as e:
            record["matches"] = None
            record["error"] = str(e)
    return record


def all_equal(records):
    """Return True if every record parsed and all canonical forms are equal."""
    specs = [r["spec"] for r in records]
    return all(s is not None for s in specs) and len(set(specs)) <= 1


def render(records, output_format):
    """Render report records in the selected output format."""
    if output_format == OutputFormats.JSON.value:
        return json.dumps(records, indent=2)
    lines = []
    for record in records:
        if record["kind"] is None:
            lines.append(f"{record['input']}: error: {record['error']}")
            continue
        line = f"{record['input']}: {record['kind']} {record['spec']}"
        if "matches" in record:
            if record["matches"] is None:
                line += f" (error: {record['error']})"
            else:
                line += " (matches)" if record["matches"] else " (no match)"
        lines.append(line)
    return "\n".join(lines)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    config = load_config(find_config_path(args.CONFIG))

    # The flag wins over the config file.
    if not args.LOG_LEVEL and config.get("log_level"):
        configure_logging(config["log_level"])
    output_format = args.OUTPUT_FORMAT or config.get("output_format") or Constants.DEFAULT_OUTPUT_FORMAT

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action="main",
                count=len(args.specs),
            )
        )

    records = [inspect_spec(raw, resolved=args.RESOLVED, match=args.MATCH) for raw in args.specs]
    print(render(records, output_format))

    if any(r["kind"] is None for r in records):
        logger.error("One or more specifications could not be parsed.")
        sys.exit(ExitCodes.PARSE_ERROR.value)

    if args.COMPARE and not all_equal(records):
        logger.warning("Specifications are not equal.")
        sys.exit(ExitCodes.NOT_EQUAL.value)

    if args.MATCH is not None and not all(r.get("matches") for r in records):
        logger.warning("One or more specifications do not accept %s.", args.MATCH)
        sys.exit(ExitCodes.NO_MATCH.value)

    sys.exit(ExitCodes.SUCCESS.value)

if __name__ == "__main__":
    main()
