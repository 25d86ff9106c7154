"""Derived economic indicators."""

from macro_dashboard.indicators.hdi import estimate_hdi
from macro_dashboard.indicators.money_multiplier import estimate_money_multiplier
from macro_dashboard.indicators.macro_model import islm_curves, islm_trajectory, synthesize_ad_as
from macro_dashboard.indicators.period_stats import latest_snapshot, summarize

__all__ = [
    "estimate_hdi",
    "estimate_money_multiplier",
    "islm_curves",
    "islm_trajectory",
    "synthesize_ad_as",
    "latest_snapshot",
    "summarize",
]
