"""Align per-indicator series into one record per calendar year."""

import logging
from dataclasses import dataclass
from typing import Callable

from macro_dashboard.indicators.hdi import attach_hdi_estimates
from macro_dashboard.indicators.money_multiplier import estimate_from_inputs
from macro_dashboard.models import (
    AlignedSeries,
    AnnualRecord,
    HDIYearPoint,
    MoneyMultiplierInputs,
    RawObservation,
    YearWindow,
)


logger = logging.getLogger(__name__)


def _round1(value: float) -> float:
    return round(value, 1)


def _billions(value: float) -> float:
    return round(value / 1e9, 1)


def _as_is(value: float) -> float:
    return value


@dataclass(frozen=True)
class FieldRule:
    """Maps one bundle series onto one record field."""

    series: str
    field: str
    transform: Callable[[float], float] = _as_is
    fallback: bool = False  # only fills the field when still empty


# Fallback rules run after every primary rule, whatever their position here
ECONOMIC_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("gdp", "gdp_billions", _billions),
    FieldRule("growth", "growth_pct", _round1),
    FieldRule("gdp_per_capita", "gdp_per_capita", round),
    FieldRule("inflation", "inflation_pct", _round1),
    FieldRule("unemployment", "unemployment_pct", _round1),
    FieldRule("exchange_rate", "exchange_rate"),
    FieldRule("real_exchange_rate", "real_exchange_rate"),
    FieldRule("interest_rate", "interest_rate"),
    FieldRule("lending_rate", "lending_rate"),
    FieldRule("current_account", "current_account"),
    FieldRule("foreign_reserves", "foreign_reserves", lambda v: v / 1e9),
    FieldRule("capital_flows", "capital_flows"),
    FieldRule("inflation_alt", "inflation_pct", _round1, fallback=True),
)

SOCIAL_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("life_expectancy", "life_expectancy"),
    FieldRule("literacy", "literacy_rate"),
    FieldRule("schooling", "mean_years_school"),
    FieldRule("gni", "gni_per_capita"),
    FieldRule("poverty", "poverty_rate"),
    FieldRule("gini", "gini_index"),
    FieldRule("health_expenditure", "health_expenditure"),
    FieldRule("education_expenditure", "education_expenditure"),
)

# Consumed by the money multiplier, never written to records directly
MONEY_FAMILY = ("broad_money", "money_supply", "bank_deposits", "domestic_credit", "reserve_money")


def _valid(observations: list[RawObservation], window: YearWindow):
    for obs in observations or []:
        if obs.value is not None and window.contains(obs.year):
            yield obs


def _merge(years: dict, factory, bundle: dict, rules: tuple[FieldRule, ...], window: YearWindow):
    ordered = sorted(rules, key=lambda rule: rule.fallback)
    for rule in ordered:
        for obs in _valid(bundle.get(rule.series, []), window):
            record = years.setdefault(obs.year, factory(obs.year))
            if rule.fallback and getattr(record, rule.field) is not None:
                continue
            setattr(record, rule.field, rule.transform(obs.value))


def collect_by_year(observations: list[RawObservation], window: YearWindow) -> dict[int, float]:
    """Year-keyed side map of one series."""
    return {obs.year: obs.value for obs in _valid(observations, window)}


def align_economic(bundle: dict[str, list[RawObservation]], window: YearWindow) -> AlignedSeries:
    """
    Merge the economic bundle into year records.

    Args:
        bundle: Raw series keyed by bundle name
        window: Years to keep

    Returns:
        All records plus the GDP-bearing and inflation-bearing views,
        each sorted ascending by year
    """
    years: dict[int, AnnualRecord] = {}
    _merge(years, lambda year: AnnualRecord(year=year), bundle, ECONOMIC_FIELDS, window)

    money = {name: collect_by_year(bundle.get(name, []), window) for name in MONEY_FAMILY}

    for year, record in years.items():
        inputs = MoneyMultiplierInputs(
            broad_money=money["broad_money"].get(year),
            money_supply_pct_gdp=money["money_supply"].get(year),
            gdp=record.gdp_billions,
            bank_deposits_ratio=money["bank_deposits"].get(year),
            inflation_pct=record.inflation_pct,
            unemployment_pct=record.unemployment_pct,
            domestic_credit_pct_gdp=money["domestic_credit"].get(year),
            reserve_money_ratio=money["reserve_money"].get(year),
        )
        record.money_multiplier = round(estimate_from_inputs(inputs), 1)

    records = sorted(years.values(), key=lambda r: r.year)
    gdp_records = [r for r in records if r.has_gdp_data]
    inflation_records = [r for r in records if r.has_inflation_data]

    logger.info(
        f"Aligned {len(records)} years ({window.start_year}-{window.end_year}): "
        f"{len(gdp_records)} GDP, {len(inflation_records)} inflation"
    )
    return AlignedSeries(
        records=records, gdp_records=gdp_records, inflation_records=inflation_records
    )


def align_social(bundle: dict[str, list[RawObservation]], window: YearWindow) -> list[HDIYearPoint]:
    """Merge the social bundle into HDI points, with the HDI estimate attached."""
    years: dict[int, HDIYearPoint] = {}
    _merge(years, lambda year: HDIYearPoint(year=year), bundle, SOCIAL_FIELDS, window)

    points = attach_hdi_estimates(sorted(years.values(), key=lambda p: p.year))
    logger.info(f"Aligned {len(points)} HDI years")
    return points
