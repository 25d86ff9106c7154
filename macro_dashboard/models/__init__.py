"""Data models."""

from .economic_data import (
    AlignedSeries,
    AnnualRecord,
    DerivedYearPoint,
    Equilibrium,
    HDIYearPoint,
    ISLMCurvePoint,
    ISLMCurves,
    ISLMTrajectoryPoint,
    MoneyMultiplierInputs,
    PeriodStats,
    RawObservation,
    StatsSnapshot,
    YearWindow,
)

__all__ = [
    "AlignedSeries",
    "AnnualRecord",
    "DerivedYearPoint",
    "Equilibrium",
    "HDIYearPoint",
    "ISLMCurvePoint",
    "ISLMCurves",
    "ISLMTrajectoryPoint",
    "MoneyMultiplierInputs",
    "PeriodStats",
    "RawObservation",
    "StatsSnapshot",
    "YearWindow",
]
