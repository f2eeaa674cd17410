"""CLI entry point for the content selection engine."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from ContentSelection.shared.config import CliDefaults, FilterConfig

logger = logging.getLogger("ContentSelection")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
    )


def _add_select_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("select", help="Select and order items")
    p.add_argument("--items", required=True, type=Path, help="Items JSON file")
    p.add_argument("--settings", type=Path, help="Settings JSON file")
    p.add_argument(
        "--max-count", type=int,
        help="Maximum number of items to keep",
    )
    p.add_argument(
        "--accept-tags", nargs="*",
        help="Keep only items carrying these tags",
    )
    p.add_argument(
        "--strict", action="store_true",
        help="Require every accept tag instead of any one",
    )
    p.add_argument(
        "--ordered", action="store_true",
        help="Order items by their order-N tags",
    )
    p.add_argument(
        "--singular", action="store_true",
        help="Output only the first selected item",
    )
    p.add_argument("--output", type=Path, help="Output JSON file")
    p.set_defaults(func=_cmd_select)


def _build_config(args: argparse.Namespace) -> FilterConfig:
    """Settings file (or environment defaults), explicit flags on top."""
    from ContentSelection.pipeline.artifacts import load_settings

    if args.settings:
        config = load_settings(args.settings)
    else:
        defaults = CliDefaults.from_env()
        config = FilterConfig(
            max_count=defaults.max_count,
            strict=defaults.strict,
            ordered=defaults.ordered,
        )
    overrides = {}
    if args.max_count is not None:
        overrides["max_count"] = args.max_count
    if args.accept_tags:
        overrides["accept_tags"] = tuple(args.accept_tags)
    if args.strict:
        overrides["strict"] = True
    if args.ordered:
        overrides["ordered"] = True
    return replace(config, **overrides) if overrides else config


def _cmd_select(args: argparse.Namespace) -> int:
    from ContentSelection.pipeline.artifacts import SelectionReport, load_items
    from ContentSelection.pipeline.errors import ContentSelectionError
    from ContentSelection.pipeline.run import first_or_none, run

    try:
        config = _build_config(args)
        items = load_items(args.items)
        result = run(items, config)
    except ContentSelectionError as exc:
        logger.error("[CONTENT-SELECT] Selection failed: %s", exc)
        return 2

    if args.singular:
        payload = json.dumps(first_or_none(result), indent=2)
        if args.output:
            args.output.write_text(payload)
        else:
            print(payload)
        return 0

    report = SelectionReport(
        config=config,
        total_items=len(items),
        items=tuple(result),
    )
    if args.output:
        report.to_json(args.output)
        logger.info(
            "[CONTENT-SELECT] Selected %d of %d items -> %s",
            report.selected_items,
            report.total_items,
            args.output,
        )
    else:
        print(json.dumps(list(report.items), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="content-select",
        description="Tag-based selection and ordering of content items",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    _add_select_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(getattr(args, "verbose", False))

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
