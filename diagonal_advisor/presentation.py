"""Display text and terminal rendering for evaluation results."""

from __future__ import annotations

from tabulate import tabulate

from diagonal_advisor.models.result import Advice, StrategyName, StrategyResult

STRATEGY_LABELS: dict[StrategyName, str] = {
    StrategyName.PMCC_CALL_DIAGONAL: "PMCC / Call Diagonal",
    StrategyName.PUT_DIAGONAL: "Put Diagonal",
    StrategyName.BEAR_CALL_SPREAD: "Bear Call Spread",
    StrategyName.WAIT: "Wait / structure not favorable",
}

ADVICE_LABELS: dict[Advice, str] = {
    Advice.OPEN: "Open position",
    Advice.SMALL: "Small size / observe",
    Advice.WAIT: "Wait for structure to improve",
}


def strategy_label(name: StrategyName) -> str:
    return STRATEGY_LABELS[name]


def advice_label(advice: Advice) -> str:
    return ADVICE_LABELS[advice]


def _fmt_range(rng: tuple[float, float] | None) -> str:
    if rng is None:
        return ""
    return f"{rng[0]:+.2f} .. {rng[1]:+.2f}"


def format_result(result: StrategyResult) -> str:
    """Render a result as plain-text tables (one block per section)."""
    lines: list[str] = []

    rows = [
        ["Side", result.side.value],
        ["Strategy", strategy_label(result.name)],
        ["Advice", advice_label(result.advice)],
        ["Score", f"{result.score:.0f} / 100"],
        ["Net Delta", f"{result.net_delta:.2f}"],
        ["Net Theta", f"{result.net_theta:.2f}"],
        ["IV diff (near-far)", f"{result.iv_diff:.2f}"],
    ]
    lines.append(tabulate(rows, tablefmt="simple"))

    guide = result.strike_guide
    if guide is not None:
        guide_rows = []
        if guide.long_delta_range is not None:
            guide_rows.append(["Long leg Delta", _fmt_range(guide.long_delta_range)])
        if guide.short_delta_range is not None:
            guide_rows.append(["Short leg Delta", _fmt_range(guide.short_delta_range)])
        if guide.target_net_delta is not None:
            guide_rows.append(["Net Delta target", _fmt_range(guide.target_net_delta)])
        if guide.target_dte_range is not None:
            guide_rows.append(["Short leg DTE", f"{guide.target_dte_range[0]}-{guide.target_dte_range[1]}"])
        lines.append("")
        lines.append("Strike guide")
        lines.append(tabulate(guide_rows, tablefmt="simple"))
        if guide.note:
            lines.append(f"  {guide.note}")

    if result.warnings:
        lines.append("")
        lines.append("Warnings")
        lines.extend(f"  - {w}" for w in result.warnings)

    if result.adjustments:
        lines.append("")
        lines.append("Adjustments")
        lines.extend(f"  - {a}" for a in result.adjustments)

    lines.append("")
    lines.append(result.explanation)
    return "\n".join(lines)
