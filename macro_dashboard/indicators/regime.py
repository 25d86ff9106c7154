"""Shared severity tiers for inflation and unemployment thresholds."""

from enum import IntEnum


class InflationRegime(IntEnum):
    """Annual inflation tiers. Ordered, so tiers compare with >= / >."""

    UNKNOWN = 0
    LOW = 1  # <= 10%
    MODERATE = 2  # (10, 20]
    ELEVATED = 3  # (20, 30]
    HIGH = 4  # (30, 50]
    SEVERE = 5  # (50, 100]
    HYPER = 6  # > 100%


class UnemploymentRegime(IntEnum):
    """Unemployment rate tiers."""

    UNKNOWN = 0
    NORMAL = 1  # <= 10%
    HIGH = 2  # (10, 15]
    SEVERE = 3  # > 15%


def classify_inflation(inflation: float | None) -> InflationRegime:
    """Map an annual inflation rate (%) to its tier."""
    if inflation is None:
        return InflationRegime.UNKNOWN
    if inflation > 100:
        return InflationRegime.HYPER
    if inflation > 50:
        return InflationRegime.SEVERE
    if inflation > 30:
        return InflationRegime.HIGH
    if inflation > 20:
        return InflationRegime.ELEVATED
    if inflation > 10:
        return InflationRegime.MODERATE
    return InflationRegime.LOW


def classify_unemployment(unemployment: float | None) -> UnemploymentRegime:
    """Map an unemployment rate (%) to its tier."""
    if unemployment is None:
        return UnemploymentRegime.UNKNOWN
    if unemployment > 15:
        return UnemploymentRegime.SEVERE
    if unemployment > 10:
        return UnemploymentRegime.HIGH
    return UnemploymentRegime.NORMAL


def unemployment_penalty(unemployment: float | None) -> float:
    """Multiplicative penalty applied to credit-expansion estimates."""
    regime = classify_unemployment(unemployment)
    if regime == UnemploymentRegime.SEVERE:
        return 0.9
    if regime == UnemploymentRegime.HIGH:
        return 0.95
    return 1.0
