"""Evaluate one input snapshot from the command line.

Usage (after pip install):
    advisor-eval --preset bullish
    advisor-eval --trend Up --iv-near 70 --iv-far 40 --buy-delta 0.8 --sell-delta 0.25 \\
        --buy-theta -0.04 --sell-theta 0.09 --sell-dte 21
    advisor-eval --preset sideways --sell-delta -0.5 --json
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from diagonal_advisor.config import get_settings
from diagonal_advisor.presentation import format_result
from diagonal_advisor.presets import PRESETS, get_preset
from diagonal_advisor.service.advisor import AdvisorService
from diagonal_advisor.volatility import get_volatility_source

# (flag, dest) for every form field; values stay strings until the normalizer sees them
_FIELD_FLAGS = [
    ("--trend", "trend"),
    ("--earnings-days", "earnings_days"),
    ("--iv-near", "iv_near"),
    ("--iv-far", "iv_far"),
    ("--total-iv-rank", "total_iv_rank"),
    ("--buy-delta", "buy_delta"),
    ("--sell-delta", "sell_delta"),
    ("--buy-theta", "buy_theta"),
    ("--sell-theta", "sell_theta"),
    ("--sell-dte", "sell_dte"),
    ("--price-near", "price_near"),
    ("--price-far", "price_far"),
]


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Evaluate a diagonal / PMCC setup")
    parser.add_argument(
        "--preset",
        choices=list(PRESETS),
        default=None,
        help="Start from an example snapshot; field flags override it",
    )
    parser.add_argument(
        "--vol-source",
        choices=["rank_pair", "term_structure"],
        default=settings.volatility.source,
        help=f"How --iv-near/--iv-far are read (default: {settings.volatility.source})",
    )
    for flag, dest in _FIELD_FLAGS:
        parser.add_argument(flag, dest=dest, default=None)
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    raw: dict = {}
    if args.preset:
        raw.update(get_preset(args.preset).model_dump())
    for _, dest in _FIELD_FLAGS:
        value = getattr(args, dest)
        if value is not None:
            raw[dest] = value
    if args.trend is None and not args.preset:
        parser.error("--trend is required unless --preset is given")

    advisor = AdvisorService(volatility_source=get_volatility_source(args.vol_source))
    try:
        result = advisor.evaluate_raw(raw)
    except ValidationError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_result(result))


if __name__ == "__main__":
    main()
