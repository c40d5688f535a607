"""Advice, risk warnings, strike guidance and adjustment hints.

Every rule here is evaluated independently; order of the returned lists
follows rule order, not severity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagonal_advisor.engine.scoring import earnings_risk
from diagonal_advisor.models.result import Advice, StrategyName, StrikeGuide
from diagonal_advisor.normalize import to_number

if TYPE_CHECKING:
    from diagonal_advisor.config import (
        AdjustmentSettings,
        AdviceSettings,
        ScoringSettings,
        StrikeGuideSettings,
    )
    from diagonal_advisor.models.inputs import StrategyInputs


def advise(score: float, cfg: AdviceSettings) -> Advice:
    if score >= cfg.open_threshold:
        return Advice.OPEN
    if score >= cfg.small_threshold:
        return Advice.SMALL
    return Advice.WAIT


def build_warnings(inputs: StrategyInputs, cfg: ScoringSettings) -> list[str]:
    warnings: list[str] = []

    if inputs.iv_diff <= 0:
        warnings.append(
            "Diagonal structure warning: far-dated IV is at or above near-dated IV, "
            "so the long leg is the expensive one. Avoid Diagonal/PMCC here."
        )

    if inputs.net_theta <= 0:
        warnings.append(
            "Theta is not positive: the position bleeds time value. Move the short leg "
            "further OTM or shorten its DTE."
        )

    if earnings_risk(inputs, cfg):
        warnings.append(
            "Earnings are close and near-term IV rank is high: trade small or wait "
            "for the IV crush before buying the long leg."
        )

    return warnings


def build_strike_guide(name: StrategyName, cfg: StrikeGuideSettings, bands: AdjustmentSettings) -> StrikeGuide | None:
    """Delta targets for the selected strategy; None when waiting."""
    if name == StrategyName.PMCC_CALL_DIAGONAL:
        lo, hi = bands.pmcc_net_delta_band
        return StrikeGuide(
            long_delta_range=cfg.pmcc_long_delta,
            short_delta_range=cfg.pmcc_short_delta,
            target_net_delta=bands.pmcc_net_delta_band,
            note=(
                f"Target net Delta {lo:.2f}-{hi:.2f}. Buy the far-dated call deep ITM, "
                f"sell the near-dated call OTM."
            ),
        )

    if name == StrategyName.PUT_DIAGONAL:
        lo, hi = bands.put_diagonal_net_delta_band
        return StrikeGuide(
            long_delta_range=cfg.put_diagonal_long_delta,
            short_delta_range=cfg.put_diagonal_short_delta,
            target_net_delta=bands.put_diagonal_net_delta_band,
            note=(
                f"Target net Delta {lo:+.2f} to {hi:+.2f} with net Theta > 0. If net Delta "
                f"runs negative, move the short put up (smaller |Delta|)."
            ),
        )

    if name == StrategyName.BEAR_CALL_SPREAD:
        dte_lo, dte_hi = cfg.bear_call_dte
        return StrikeGuide(
            short_delta_range=cfg.bear_call_short_delta,
            target_dte_range=cfg.bear_call_dte,
            note=(
                f"Sell the near-dated call around overhead resistance and buy a further OTM "
                f"call as protection. {dte_lo}-{dte_hi} days to expiry collects Theta faster."
            ),
        )

    return None


def build_adjustments(
    inputs: StrategyInputs,
    name: StrategyName,
    cfg: AdjustmentSettings,
    far_days_default: float,
) -> list[str]:
    adjustments: list[str] = []
    sell_dte = to_number(inputs.sell_dte, far_days_default)
    short_delta = abs(inputs.sell_delta)
    net_delta = inputs.net_delta

    # 1. Short leg too close to the money
    if name in (StrategyName.PMCC_CALL_DIAGONAL, StrategyName.PUT_DIAGONAL) and short_delta > cfg.roll_short_delta:
        adjustments.append(
            f"Short leg Delta above {cfg.roll_short_delta:.2f}: roll up (higher strike) or out "
            f"(later expiry) to lower the odds of assignment."
        )

    # 2. Short leg nearly expired and far OTM
    if sell_dte <= cfg.early_close_dte and short_delta < cfg.early_close_delta:
        adjustments.append(
            f"Short leg at {cfg.early_close_dte:.0f} DTE or less with Delta under "
            f"{cfg.early_close_delta:.2f}: buy it back early and sell the next cycle "
            f"to lock in the remaining Theta."
        )

    # 3. Net Delta outside the strategy's band
    if name == StrategyName.PMCC_CALL_DIAGONAL:
        lo, hi = cfg.pmcc_net_delta_band
        if net_delta < lo:
            adjustments.append(
                f"Net Delta below {lo:.2f}: move the long call deeper ITM or the short call "
                f"further OTM to add directionality."
            )
        elif net_delta > hi:
            adjustments.append(
                f"Net Delta above {hi:.2f}: move the short call toward ATM or the long call "
                f"further out to reduce directional exposure."
            )
    elif name == StrategyName.PUT_DIAGONAL:
        lo, hi = cfg.put_diagonal_net_delta_band
        if net_delta < lo:
            adjustments.append(
                f"Net Delta below {lo:+.2f}: move the short put up (smaller |Delta|) or the "
                f"long put closer to ATM to bring net Delta back to {lo:+.2f}..{hi:+.2f}."
            )
        elif net_delta > hi:
            adjustments.append(
                f"Net Delta above {hi:+.2f}: move the short put down (larger |Delta|) or the "
                f"long put further OTM to bring net Delta back to {lo:+.2f}..{hi:+.2f}."
            )

    # 4. Weak time decay
    if inputs.net_theta <= cfg.weak_theta:
        adjustments.append(
            "Net Theta is weak: shorten the short leg to 15-30 DTE, move it nearer ATM "
            "(Delta 0.25-0.35), or wait for higher IV before opening."
        )

    return adjustments
