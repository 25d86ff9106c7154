"""Money multiplier estimation from World Bank monetary indicators."""

import logging
import math

from macro_dashboard.indicators.regime import (
    InflationRegime,
    UnemploymentRegime,
    classify_inflation,
    classify_unemployment,
    unemployment_penalty,
)
from macro_dashboard.models import MoneyMultiplierInputs


logger = logging.getLogger(__name__)

DEFAULT_MULTIPLIER = 2.5

# Assumed monetary base as % of GDP for the M2/GDP method
MONETARY_BASE_PCT_GDP = 15

# Reserve requirement by inflation tier (domestic credit method)
RESERVE_RATIOS = {
    InflationRegime.HYPER: 0.20,
    InflationRegime.SEVERE: 0.16,
    InflationRegime.HIGH: 0.14,
    InflationRegime.ELEVATED: 0.14,
}
BASE_RESERVE_RATIO = 0.12

# M2/GDP efficiency penalty by inflation tier
INFLATION_PENALTIES = {
    InflationRegime.HYPER: 0.7,
    InflationRegime.SEVERE: 0.8,
    InflationRegime.HIGH: 0.9,
    InflationRegime.ELEVATED: 0.9,
}

# Fallback multiplier by inflation tier
FALLBACK_BASE = {
    InflationRegime.HYPER: 1.8,
    InflationRegime.SEVERE: 2.2,
    InflationRegime.HIGH: 2.8,
    InflationRegime.ELEVATED: 2.8,
    InflationRegime.MODERATE: 3.2,
    InflationRegime.LOW: 3.2,
}


def _positive(value: float | None) -> bool:
    return value is not None and value > 0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _domestic_credit_method(inflation: float | None, unemployment: float | None) -> float:
    """m = 1 / (reserve ratio + currency ratio + excess reserves)."""
    regime = classify_inflation(inflation)
    reserve_ratio = RESERVE_RATIOS.get(regime, BASE_RESERVE_RATIO)
    currency_ratio = 0.08 if regime >= InflationRegime.SEVERE else 0.05
    excess_reserves = (
        0.03 if classify_unemployment(unemployment) == UnemploymentRegime.SEVERE else 0.01
    )

    multiplier = 1 / (reserve_ratio + currency_ratio + excess_reserves)
    return _clamp(multiplier, 1.2, 5.0)


def _money_supply_method(
    money_supply: float, inflation: float | None, unemployment: float | None
) -> float:
    multiplier = money_supply / MONETARY_BASE_PCT_GDP
    multiplier *= INFLATION_PENALTIES.get(classify_inflation(inflation), 1.0)
    multiplier *= unemployment_penalty(unemployment)
    return _clamp(multiplier, 1.2, 4.5)


def _bank_deposits_method(bank_deposits: float) -> float:
    # Lower liquid reserves mean more lending per unit of base money
    multiplier = 1 / (bank_deposits / 100 + 0.1)
    return _clamp(multiplier, 1.5, 4.0)


def _fallback_method(inflation: float | None, unemployment: float | None) -> float:
    base = FALLBACK_BASE.get(classify_inflation(inflation), DEFAULT_MULTIPLIER)
    return base * unemployment_penalty(unemployment)


def estimate_money_multiplier(
    broad_money: float | None,
    money_supply: float | None,
    gdp: float | None,
    bank_deposits: float | None,
    inflation: float | None,
    unemployment: float | None,
    domestic_credit: float | None = None,
    reserve_money: float | None = None,
) -> float:
    """
    Estimate the money multiplier for one year.

    Methods are tried in priority order and the first applicable one wins:
    domestic credit, M2/GDP, bank liquid reserves, then an inflation-regime
    fallback. Never fails: any internal error yields DEFAULT_MULTIPLIER.

    Args:
        broad_money: Broad money (LCU), informational
        money_supply: Money and quasi money as % of GDP
        gdp: GDP in billions, informational
        bank_deposits: Bank liquid reserves to assets (%)
        inflation: Annual inflation (%)
        unemployment: Unemployment rate (%)
        domestic_credit: Domestic credit by financial sector (% of GDP)
        reserve_money: Reserve money ratio, informational

    Returns:
        Multiplier estimate
    """
    try:
        if _positive(domestic_credit) and _positive(money_supply):
            multiplier = _domestic_credit_method(inflation, unemployment)
            method = "domestic credit"
        elif _positive(money_supply):
            multiplier = _money_supply_method(money_supply, inflation, unemployment)
            method = "M2/GDP"
        elif _positive(bank_deposits):
            multiplier = _bank_deposits_method(bank_deposits)
            method = "bank deposits"
        else:
            multiplier = _fallback_method(inflation, unemployment)
            method = "fallback"

        if not math.isfinite(multiplier):
            raise ValueError(f"non-finite multiplier from {method} method")
    except Exception as e:
        logger.warning(f"Error calculating money multiplier: {e}")
        return DEFAULT_MULTIPLIER

    logger.debug(f"Money multiplier via {method} method: {multiplier:.2f}")
    return multiplier


def estimate_from_inputs(inputs: MoneyMultiplierInputs) -> float:
    """Estimate from a MoneyMultiplierInputs bundle."""
    return estimate_money_multiplier(
        inputs.broad_money,
        inputs.money_supply_pct_gdp,
        inputs.gdp,
        inputs.bank_deposits_ratio,
        inputs.inflation_pct,
        inputs.unemployment_pct,
        inputs.domestic_credit_pct_gdp,
        inputs.reserve_money_ratio,
    )
