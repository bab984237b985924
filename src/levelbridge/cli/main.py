"""CLI entrypoint for levelbridge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from levelbridge import __version__
from levelbridge.cli.handlers import handle_classify, handle_resolve, handle_validate_config
from levelbridge.constants.branding import CLI_DESCRIPTION
from levelbridge.constants.config import VALID_SCHEMES
from levelbridge.constants.reporting import OUTPUT_FORMATS
from levelbridge.exceptions import ConfigError, LevelBridgeError


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding levelbridge.yaml")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "-s",
        "--scheme",
        choices=sorted(VALID_SCHEMES),
        default=None,
        help="Level scheme: default (wide numeric levels) or stdlib (Python logging levels)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="TIER=VALUE",
        help="Override one severity setting, e.g. warn=Notice (repeat for multiple tiers)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="levelbridge",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Show the thresholds a configuration resolves to")
    _add_config_flags(resolve)
    resolve.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Output format (default: text)")
    resolve.add_argument("-v", "--verbose", action="store_true", help="Include routine confirmation diagnostics")

    classify = subparsers.add_parser("classify", help="Classify level values or level names into sink tiers")
    classify.add_argument("levels", nargs="+", help="Numeric level values or level names")
    _add_config_flags(classify)
    classify.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Output format (default: text)")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without resolving")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding levelbridge.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        if args.command == "validate-config":
            return handle_validate_config(args)
        if args.command == "resolve":
            return handle_resolve(args)
        if args.command == "classify":
            return handle_classify(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except LevelBridgeError as exc:
        print(f"levelbridge error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
