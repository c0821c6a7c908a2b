"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import re
import sys

from sutrachain.config import config_fingerprint, load_config, validate_config_file
from sutrachain.constants.families import BUNDLED_FAMILIES
from sutrachain.exceptions import ConfigError, SutraChainError
from sutrachain.exceptions.validation import format_errors
from sutrachain.io import dumps_json
from sutrachain.model import ClassificationResult, RuleAnalysis
from sutrachain.reporting import StdoutReporter, build_payload, write_results_json
from sutrachain.sutras import default_engine, default_registry
from sutrachain.types import ContextScalar

logger = logging.getLogger(__name__)

_INT_PATTERN: re.Pattern[str] = re.compile(r"^[+-]?\d+$")


def parse_context_value(value: str) -> ContextScalar:
    """Parse a ``--context`` value: booleans, integers, else the raw string."""
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if _INT_PATTERN.match(value.strip()):
        return int(value)
    return value


def parse_context_pairs(pairs: list[str]) -> dict[str, ContextScalar]:
    """Turn ``key=value`` strings into a context mapping; later keys win."""
    context: dict[str, ContextScalar] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"--context expects key=value, got {pair!r}")
        context[key.strip()] = parse_context_value(value)
    return context


def handle_classify(args: argparse.Namespace) -> int:
    """Classify each word and report on stdout and/or a JSON file."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
        context = parse_context_pairs(args.context)
        engine = default_engine(config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logger.debug("Config fingerprint %s", config_fingerprint(config))
    rule_ids = tuple(args.rule) if args.rule else None

    try:
        results: list[ClassificationResult | RuleAnalysis]
        if args.analyze:
            results = [engine.analyze(args.family, word, context, rule_ids=rule_ids) for word in args.words]
        else:
            results = list(engine.evaluate_many(args.family, args.words, context, rule_ids=rule_ids))
        if args.output is not None:
            write_results_json(args.output, results)
    except SutraChainError as exc:
        print(f"Classification error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(dumps_json(build_payload(results)))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            results,
            family=args.family,
            strategy=engine.strategy_for(args.family),
            color=use_color,
            verbose=args.verbose,
        )
        print(reporter.render())
    return 0


def handle_rules(args: argparse.Namespace) -> int:
    """List registered families and their chains in evaluation order."""
    registry = default_registry()
    families = [args.family] if args.family else list(registry.families)
    for family in families:
        chain = registry.get_chain(family)
        marker = "" if family in BUNDLED_FAMILIES else " (custom)"
        print(f"{family}{marker}: {len(chain)} rules")
        for predicate in chain:
            print(f"  {predicate.rule_id:<20} v{predicate.version}  {predicate.description}")
            if predicate.context_keys:
                print(f"  {'':<20}     context: {', '.join(predicate.context_keys)}")
    print(f"fingerprint: {registry.fingerprint()}")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
