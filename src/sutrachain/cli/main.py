"""CLI entrypoint for sutrachain."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from sutrachain import __version__
from sutrachain.cli.handlers import handle_classify, handle_rules, handle_validate_config
from sutrachain.constants.branding import CLI_DESCRIPTION
from sutrachain.constants.families import FAMILY_PRAGRHYA
from sutrachain.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sutrachain",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Classify word-forms under a rule family")
    classify.add_argument("words", nargs="+", metavar="WORD", help="Word-forms in IAST or Devanagari")
    classify.add_argument(
        "-F",
        "--family",
        default=FAMILY_PRAGRHYA,
        help=f"Rule family to evaluate (default: {FAMILY_PRAGRHYA})",
    )
    classify.add_argument(
        "-x",
        "--context",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Context entry (repeat flag for multiple values); true/false and integers are typed",
    )
    classify.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding sutrachain.yaml")
    classify.add_argument("-c", "--config", type=Path, help="Explicit config file")
    classify.add_argument(
        "--rule",
        action="append",
        default=None,
        metavar="RULE_ID",
        help="Restrict evaluation to these rule ids (repeat flag for multiple values)",
    )
    classify.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Stdout format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    classify.add_argument("-o", "--output", type=Path, default=None, help="Also write JSON results to this file")
    classify.add_argument("-a", "--analyze", action="store_true", help="Include an independent verdict per rule")
    classify.add_argument("--no-color", action="store_true", help="Disable colored output")
    classify.add_argument("-v", "--verbose", action="store_true", help="Show reasons for non-matches and debug logs")

    rules = subparsers.add_parser("rules", help="List registered rule chains")
    rules.add_argument("-F", "--family", default=None, help="Only list this family")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without classifying")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding sutrachain.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "rules":
        return handle_rules(args)
    if args.command != "classify":
        parser.error(f"Unsupported command: {args.command}")

    return handle_classify(args)


if __name__ == "__main__":
    raise SystemExit(main())
