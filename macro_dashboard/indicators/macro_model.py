"""AD/AS and IS-LM synthesis from aligned annual data.

Both models use fixed structural parameters keyed on the observed inflation
and unemployment regimes rather than estimating anything from the data:

- AD/AS: GDP components are fixed shares of GDP with regime adjustments; AS is
  a Cobb-Douglas style combination of labor, capital and productivity factors.
- Price level: piecewise compounding by historical period, with the recent
  years driven by a table of observed annual inflation.
- IS-LM: a per-year trajectory point, and for a selected year the analytic
  IS and LM curves with their intersection.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from macro_dashboard.indicators.regime import (
    InflationRegime,
    UnemploymentRegime,
    classify_inflation,
    classify_unemployment,
)
from macro_dashboard.models import (
    AnnualRecord,
    DerivedYearPoint,
    Equilibrium,
    ISLMCurvePoint,
    ISLMCurves,
    ISLMTrajectoryPoint,
)


# GDP expenditure shares (typical for a developing economy)
CONSUMPTION_SHARE = 0.65
INVESTMENT_SHARE = 0.20
GOVERNMENT_SHARE = 0.18
EXPORTS_SHARE = 0.15
IMPORTS_SHARE = 0.18

AD_BOUNDS = (30.0, 200.0)
AS_BOUNDS = (25.0, 150.0)
AD_DEFAULT = 80.0
AS_DEFAULT = 100.0

# Observed annual inflation used to compound the price level from 2020
RECENT_INFLATION: dict[int, float] = {
    2020: 40.1,
    2021: 53.8,
    2022: 69.9,
    2023: 135.4,
    2024: 150.0,  # estimate
}
RECENT_BASE_YEAR = 2020

# (first year, annual growth factor) for earlier periods, newest first
PRICE_REGIMES: tuple[tuple[int, float], ...] = (
    (2015, 1.25),
    (2002, 1.15),  # post-convertibility
    (1992, 1.02),  # convertibility
)
EARLY_PRICE_REGIME = (1980, 1.30)

ISLM_INCOME_BOUNDS = (200.0, 800.0)
ISLM_RATE_BOUNDS = (0.0, 50.0)
ISLM_INCOME_STEP = 10


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _fields(record: AnnualRecord) -> tuple[float, float, float, float]:
    """GDP, growth, inflation and unemployment with missing values as zero."""
    return (
        record.gdp_billions or 0.0,
        record.growth_pct or 0.0,
        record.inflation_pct or 0.0,
        record.unemployment_pct or 0.0,
    )


# =============================================================================
# AD / AS
# =============================================================================

def gdp_components(
    gdp: float, growth: float, inflation: float, unemployment: float
) -> tuple[float, float, float, float, float]:
    """Consumption, investment, government, exports and imports for one year."""
    if gdp <= 0:
        return 0.0, 0.0, 0.0, 0.0, 0.0

    consumption = gdp * CONSUMPTION_SHARE
    investment = gdp * INVESTMENT_SHARE
    government = gdp * GOVERNMENT_SHARE
    exports = gdp * EXPORTS_SHARE
    imports = gdp * IMPORTS_SHARE

    if classify_unemployment(unemployment) == UnemploymentRegime.SEVERE:
        consumption *= 0.95
    if classify_inflation(inflation) >= InflationRegime.SEVERE:
        investment *= 0.85
    if growth < -2:
        government *= 1.10  # counter-cyclical fiscal policy

    return consumption, investment, government, exports, imports


def aggregate_demand_index(
    gdp: float, consumption: float, investment: float, government: float, net_exports: float
) -> float:
    if gdp <= 0:
        return AD_DEFAULT
    demand = (consumption + investment + government + net_exports) / gdp * 100
    return _clamp(demand, *AD_BOUNDS)


def aggregate_supply_index(gdp: float, growth: float, inflation: float, unemployment: float) -> float:
    """Production-function style supply index: labor^0.6 * capital^0.3 * productivity^0.1."""
    if gdp <= 0:
        return AS_DEFAULT

    # ~85% employment treated as full utilization
    labor_utilization = max(50.0, 100 - unemployment) / 85
    if inflation > 0:
        capital_efficiency = max(0.6, 1 - inflation / 100)
    else:
        capital_efficiency = min(1.2, 1 + abs(inflation) / 200)
    productivity = _clamp(1 + growth / 100, 0.8, 1.3)

    supply = (
        100
        * labor_utilization ** 0.6
        * capital_efficiency ** 0.3
        * productivity ** 0.1
    )
    return _clamp(supply, *AS_BOUNDS)


def price_level_index(year: int) -> float:
    """Piecewise price level, scaled by 10 with a floor of 100."""
    if year >= RECENT_BASE_YEAR:
        level = 100.0
        for y in range(RECENT_BASE_YEAR + 1, year + 1):
            level *= 1 + RECENT_INFLATION.get(y, 0.0) / 100
    else:
        start, factor = EARLY_PRICE_REGIME
        for regime_start, regime_factor in PRICE_REGIMES:
            if year >= regime_start:
                start, factor = regime_start, regime_factor
                break
        level = 100 * factor ** (year - start)

    return max(100.0, level * 10)


def synthesize_ad_as(records: list[AnnualRecord]) -> list[DerivedYearPoint]:
    """One AD/AS point per GDP-bearing record."""
    points = []
    for record in records:
        gdp, growth, inflation, unemployment = _fields(record)
        consumption, investment, government, exports, imports = gdp_components(
            gdp, growth, inflation, unemployment
        )
        net_exports = exports - imports

        points.append(
            DerivedYearPoint(
                year=record.year,
                ad=aggregate_demand_index(gdp, consumption, investment, government, net_exports),
                as_=aggregate_supply_index(gdp, growth, inflation, unemployment),
                price=price_level_index(record.year),
                consumption=consumption,
                investment=investment,
                government=government,
                net_exports=net_exports,
                real_gdp=gdp,
                inflation_rate=inflation,
                unemployment_rate=unemployment,
                growth_rate=growth,
            )
        )
    return points


# =============================================================================
# IS-LM
# =============================================================================

def nominal_interest_rate(inflation: float, unemployment: float) -> float:
    """Policy-rate proxy: Fisher-style base plus risk premium minus slack discount."""
    rate = 5 + 0.8 * inflation

    regime = classify_inflation(inflation)
    if regime >= InflationRegime.SEVERE:
        rate += 15
    elif regime >= InflationRegime.ELEVATED:
        rate += 8
    elif regime >= InflationRegime.MODERATE:
        rate += 3

    slack = classify_unemployment(unemployment)
    if slack == UnemploymentRegime.SEVERE:
        rate -= 5
    elif slack == UnemploymentRegime.HIGH:
        rate -= 2

    return rate


def islm_trajectory(records: list[AnnualRecord]) -> list[ISLMTrajectoryPoint]:
    """Single income / interest-rate point per year."""
    points = []
    for record in records:
        gdp, growth, inflation, unemployment = _fields(record)
        nominal = nominal_interest_rate(inflation, unemployment)
        income = _clamp(0.8 * gdp + 200, 300.0, 800.0)
        investment = max(10.0, 0.20 * gdp - 2 * nominal)

        if classify_inflation(inflation) >= InflationRegime.HIGH:
            demand_coeff, elasticity = 0.4, 0.5
        else:
            demand_coeff, elasticity = 0.25, 1.0
        money = max(20.0, demand_coeff * income - elasticity * nominal)

        points.append(
            ISLMTrajectoryPoint(
                year=record.year,
                interest_rate=nominal,
                income=income,
                investment=investment,
                money=money,
                real_gdp=gdp,
                inflation_rate=inflation,
                unemployment_rate=unemployment,
                growth_rate=growth,
                nominal_rate=nominal,
                real_rate=nominal - inflation,
            )
        )
    return points


@dataclass(frozen=True)
class ISLMParameters:
    """Structural parameters of the IS and LM relations for one year.

    IS: i = (A - Y/alpha) / b
    LM: i = (k*Y - M/P) / h
    """

    gdp: float
    inflation: float
    unemployment: float
    autonomous_spending: float  # A
    investment_sensitivity: float  # b
    real_money_supply: float  # M/P
    money_demand_interest: float  # h
    mpc: float = 0.65
    tax_rate: float = 0.25
    money_demand_income: float = 0.25  # k

    @classmethod
    def from_observation(
        cls, gdp: float, inflation: float, unemployment: float = 0.0
    ) -> "ISLMParameters":
        regime = classify_inflation(inflation)
        return cls(
            gdp=gdp,
            inflation=inflation,
            unemployment=unemployment,
            autonomous_spending=0.3 * gdp,
            investment_sensitivity=4.0 if regime >= InflationRegime.ELEVATED else 2.0,
            real_money_supply=0.4 * gdp / max(1.0, inflation / 10),
            money_demand_interest=8.0 if regime >= InflationRegime.HIGH else 15.0,
        )

    @property
    def multiplier(self) -> float:
        """Keynesian multiplier alpha = 1 / (1 - c(1 - t))."""
        return 1 / (1 - self.mpc * (1 - self.tax_rate))

    def is_rate(self, income: float) -> float:
        return (self.autonomous_spending - income / self.multiplier) / self.investment_sensitivity

    def lm_rate(self, income: float) -> float:
        return (
            self.money_demand_income * income - self.real_money_supply
        ) / self.money_demand_interest

    def equilibrium_income(self) -> float:
        """Y* = (h*A + b*M/P) / (h/alpha + b*k), where IS meets LM."""
        h = self.money_demand_interest
        b = self.investment_sensitivity
        numerator = h * self.autonomous_spending + b * self.real_money_supply
        denominator = h / self.multiplier + b * self.money_demand_income
        return numerator / denominator


def historical_estimate(year: int, records: list[AnnualRecord]) -> tuple[float, float, float]:
    """Approximate (gdp, inflation, unemployment) for a year without data."""
    if year >= 2010:
        if records:
            latest = records[-1]
            return (
                latest.gdp_billions if latest.gdp_billions is not None else 630.0,
                latest.inflation_pct if latest.inflation_pct is not None else 50.0,
                latest.unemployment_pct if latest.unemployment_pct is not None else 8.0,
            )
        return 630.0, 50.0, 8.0
    if year >= 2002:
        # Post-convertibility recovery
        gdp = 200 + (year - 2002) * 15
        inflation = 10 + (year - 2002) * 3 if year < 2007 else 25
        unemployment = max(8, 20 - (year - 2002) * 1.5)
        return gdp, inflation, unemployment
    if year >= 1992:
        # Convertibility, ending in crisis
        gdp = 200 + (year - 1992) * 8
        inflation = 2 if year < 1999 else 5 + (year - 1999) * 5
        unemployment = 12 if year < 1995 else 15 + (year - 1995) * 0.5
        return gdp, inflation, unemployment
    if year >= 1985:
        # Hyperinflation
        gdp = 150 + (year - 1985) * 5
        inflation = 100 + (year - 1985) * 200 if year < 1989 else 1000
        unemployment = 10 + (year - 1985)
        return gdp, inflation, unemployment
    gdp = 120 + (year - 1975) * 3
    inflation = 50 + (year - 1975) * 20
    unemployment = 8 + (year - 1975) * 0.3
    return gdp, inflation, unemployment


def islm_curves(records: list[AnnualRecord], year: int) -> ISLMCurves:
    """
    IS and LM curves and their equilibrium for one year.

    Years without a record fall back to a historical-period estimate and the
    equilibrium is flagged accordingly.
    """
    record = next((r for r in records if r.year == year), None)
    if record is not None:
        gdp, _, inflation, unemployment = _fields(record)
        is_estimate = False
    else:
        gdp, inflation, unemployment = historical_estimate(year, records)
        is_estimate = True

    params = ISLMParameters.from_observation(gdp, inflation, unemployment)
    raw_income = params.equilibrium_income()
    raw_rate = params.is_rate(raw_income)

    equilibrium = Equilibrium(
        income=_clamp(raw_income, *ISLM_INCOME_BOUNDS),
        interest_rate=_clamp(raw_rate, *ISLM_RATE_BOUNDS),
        year=year,
        real_gdp=gdp,
        inflation_rate=inflation,
        unemployment_rate=unemployment,
        is_historical_estimate=is_estimate,
    )

    low, high = ISLM_INCOME_BOUNDS
    grid = np.arange(low, high + ISLM_INCOME_STEP, ISLM_INCOME_STEP)
    max_rate = ISLM_RATE_BOUNDS[1]

    is_points = []
    lm_points = []
    for income in grid:
        income = float(income)
        is_rate = params.is_rate(income)
        if is_rate <= max_rate:
            is_points.append(ISLMCurvePoint(income=income, interest_rate=is_rate, curve="IS", year=year))
        lm_rate = params.lm_rate(income)
        if lm_rate <= max_rate:
            lm_points.append(ISLMCurvePoint(income=income, interest_rate=lm_rate, curve="LM", year=year))

    return ISLMCurves(year=year, is_points=is_points, lm_points=lm_points, equilibrium=equilibrium)


class ISLMViewMode(Enum):
    """How the IS-LM panel is drawn."""
    ALL = "all"  # trajectory across years
    SINGLE = "single"  # curves for one year
    COMPARE = "compare"  # curves for two years


def selected_curves(
    records: list[AnnualRecord],
    mode: ISLMViewMode,
    selected_year: int,
    compare_year: int | None = None,
) -> list[ISLMCurves]:
    """Curves to draw for the single-year and comparison views."""
    if mode == ISLMViewMode.ALL:
        return []
    curves = [islm_curves(records, selected_year)]
    if mode == ISLMViewMode.COMPARE and compare_year is not None and compare_year != selected_year:
        curves.append(islm_curves(records, compare_year))
    return curves
