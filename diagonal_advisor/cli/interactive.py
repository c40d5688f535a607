"""Interactive REPL: edit an input snapshot and watch the recommendation change.

Usage:
    advisor-cli
    advisor-cli --preset sideways --vol-source term_structure
"""

from __future__ import annotations

import argparse
import cmd
import logging
import sys

from pydantic import ValidationError
from tabulate import tabulate

from diagonal_advisor.presentation import advice_label, format_result, strategy_label
from diagonal_advisor.presets import PRESETS, get_preset
from diagonal_advisor.service.advisor import AdvisorService
from diagonal_advisor.volatility import get_volatility_source, normalize_keys

FORM_FIELDS = (
    "trend",
    "earnings_days",
    "iv_near",
    "iv_far",
    "total_iv_rank",
    "buy_delta",
    "sell_delta",
    "buy_theta",
    "sell_theta",
    "sell_dte",
    "price_near",
    "price_far",
)


def _styled(text: str, style: str = "") -> str:
    """Basic ANSI styling. Falls back to plain text if terminal doesn't support it."""
    codes = {
        "bold": "\033[1m",
        "green": "\033[32m",
        "yellow": "\033[33m",
        "red": "\033[31m",
        "cyan": "\033[36m",
        "dim": "\033[2m",
        "reset": "\033[0m",
    }
    if not sys.stdout.isatty():
        return text
    prefix = codes.get(style, "")
    return f"{prefix}{text}{codes['reset']}" if prefix else text


_ADVICE_STYLE = {"open": "green", "small": "yellow", "wait": "red"}


def _print_header(title: str) -> None:
    print(f"\n{_styled('=' * 60, 'dim')}")
    print(f"  {_styled(title, 'bold')}")
    print(f"{_styled('=' * 60, 'dim')}")


class AdvisorCLI(cmd.Cmd):
    """Interactive REPL holding one mutable input snapshot."""

    intro = (
        "\n"
        + _styled("diagonal_advisor", "bold")
        + ": strategy decision REPL\n"
        + _styled("Type 'help' for commands, 'quit' to exit.", "dim")
        + "\n"
    )
    prompt = _styled("advisor> ", "cyan") if sys.stdout.isatty() else "advisor> "

    def __init__(self, preset: str = "bullish", vol_source: str | None = None) -> None:
        super().__init__()
        source = get_volatility_source(vol_source) if vol_source else None
        self._advisor = AdvisorService(volatility_source=source)
        self._raw: dict = get_preset(preset).model_dump(mode="json")

    @property
    def fields(self) -> dict:
        return dict(self._raw)

    def _evaluate(self):
        return self._advisor.evaluate_raw(self._raw)

    def _print_summary(self) -> None:
        result = self._evaluate()
        advice = _styled(advice_label(result.advice), _ADVICE_STYLE[result.advice.value])
        print(f"  {strategy_label(result.name)} ({result.side.value}) | score {result.score:.0f} | {advice}")
        for w in result.warnings:
            print(f"  {_styled('!', 'red')} {w}")

    # --- Commands ---

    def do_set(self, arg: str) -> None:
        """Set a field and re-evaluate.\nUsage: set <field> <value>   (e.g. set sell_delta 0.30)"""
        parts = arg.split(maxsplit=1)
        if len(parts) != 2:
            print("Usage: set <field> <value>")
            return
        field = next(iter(normalize_keys({parts[0]: None})))
        if field not in FORM_FIELDS:
            print(f"{_styled('ERROR:', 'red')} unknown field '{parts[0]}'. Fields: {', '.join(FORM_FIELDS)}")
            return
        candidate = {**self._raw, field: parts[1]}
        try:
            self._advisor.build_inputs(candidate)
        except ValidationError as exc:
            print(f"{_styled('ERROR:', 'red')} {exc.errors()[0]['msg']}")
            return
        self._raw = candidate
        self._print_summary()

    def do_clear(self, arg: str) -> None:
        """Blank out an optional field (earnings_days, sell_dte, ...).\nUsage: clear <field>"""
        field = next(iter(normalize_keys({arg.strip(): None})), "")
        if field not in FORM_FIELDS or field == "trend":
            print(f"{_styled('ERROR:', 'red')} cannot clear '{arg.strip()}'")
            return
        self._raw[field] = None
        self._print_summary()

    def do_preset(self, arg: str) -> None:
        """Load an example snapshot.\nUsage: preset bullish|sideways|bearish"""
        try:
            self._raw = get_preset(arg.strip() or "bullish").model_dump(mode="json")
        except KeyError as exc:
            print(f"{_styled('ERROR:', 'red')} {exc.args[0]}")
            return
        self._print_summary()

    def do_reset(self, arg: str) -> None:
        """Reset to the bullish example."""
        self.do_preset("bullish")

    def do_show(self, arg: str) -> None:
        """Show the current input snapshot."""
        _print_header("Inputs")
        rows = [{"Field": k, "Value": "" if self._raw.get(k) is None else self._raw.get(k)} for k in FORM_FIELDS]
        print(tabulate(rows, headers="keys", tablefmt="simple", stralign="right"))

    def do_eval(self, arg: str) -> None:
        """Full evaluation of the current snapshot."""
        _print_header("Recommendation")
        print(format_result(self._evaluate()))

    def do_json(self, arg: str) -> None:
        """Print the current result as JSON."""
        print(self._evaluate().model_dump_json(indent=2))

    def do_quit(self, arg: str) -> bool:
        """Exit the REPL."""
        print("Goodbye.")
        return True

    def do_exit(self, arg: str) -> bool:
        """Exit the REPL."""
        return self.do_quit(arg)

    do_EOF = do_quit

    def default(self, line: str) -> None:
        """Handle unknown commands."""
        print(f"Unknown command: '{line}'. Type 'help' for available commands.")

    def emptyline(self) -> None:
        """Do nothing on empty line (don't repeat last command)."""
        pass


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive strategy decision REPL")
    parser.add_argument(
        "--preset",
        default="bullish",
        choices=list(PRESETS),
        help="Starting snapshot (default: bullish)",
    )
    parser.add_argument(
        "--vol-source",
        default=None,
        choices=["rank_pair", "term_structure"],
        help="Volatility source (default: from config)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        cli = AdvisorCLI(preset=args.preset, vol_source=args.vol_source)
        cli.cmdloop()
    except KeyboardInterrupt:
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
