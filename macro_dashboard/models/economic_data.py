"""Data models for economic and social indicator data."""

from dataclasses import dataclass, field, fields
from datetime import date


@dataclass(frozen=True)
class RawObservation:
    """Single annual observation from a World Bank indicator."""

    year: int
    value: float | None


@dataclass(frozen=True)
class YearWindow:
    """Selected year range, either "last N years" or a custom start/end."""

    start_year: int
    end_year: int
    years_back: int
    is_custom: bool = False

    @classmethod
    def last_years(cls, years_back: int, current_year: int | None = None) -> "YearWindow":
        current = current_year or date.today().year
        return cls(start_year=current - years_back, end_year=current, years_back=years_back)

    @classmethod
    def custom(cls, start_year: int, end_year: int) -> "YearWindow":
        start, end = min(start_year, end_year), max(start_year, end_year)
        return cls(start_year=start, end_year=end, years_back=end - start + 1, is_custom=True)

    @property
    def span(self) -> int:
        """Number of years used to decide between latest and average stats."""
        if self.is_custom:
            return self.end_year - self.start_year + 1
        return self.years_back

    def contains(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year


@dataclass
class AnnualRecord:
    """All aligned macro fields for one calendar year."""

    year: int
    gdp_billions: float | None = None
    growth_pct: float | None = None
    gdp_per_capita: int | None = None
    inflation_pct: float | None = None
    unemployment_pct: float | None = None
    money_multiplier: float | None = None
    exchange_rate: float | None = None
    real_exchange_rate: float | None = None
    interest_rate: float | None = None
    lending_rate: float | None = None
    current_account: float | None = None
    foreign_reserves: float | None = None  # billions of US$
    capital_flows: float | None = None

    @property
    def has_gdp_data(self) -> bool:
        return any(
            v is not None for v in (self.gdp_billions, self.growth_pct, self.gdp_per_capita)
        )

    @property
    def has_inflation_data(self) -> bool:
        return self.inflation_pct is not None or self.unemployment_pct is not None

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class AlignedSeries:
    """Year-aligned economic records and the two filtered views used downstream."""

    records: list[AnnualRecord]
    gdp_records: list[AnnualRecord]
    inflation_records: list[AnnualRecord]


@dataclass(frozen=True)
class MoneyMultiplierInputs:
    """Per-year inputs for the money multiplier estimate."""

    broad_money: float | None = None
    money_supply_pct_gdp: float | None = None
    gdp: float | None = None
    bank_deposits_ratio: float | None = None
    inflation_pct: float | None = None
    unemployment_pct: float | None = None
    domestic_credit_pct_gdp: float | None = None
    reserve_money_ratio: float | None = None


@dataclass
class DerivedYearPoint:
    """Synthesized AD/AS point for one year."""

    year: int
    ad: float
    as_: float
    price: float
    consumption: float
    investment: float
    government: float
    net_exports: float
    real_gdp: float
    inflation_rate: float
    unemployment_rate: float
    growth_rate: float


@dataclass
class ISLMTrajectoryPoint:
    """One year's single-point position in income / interest-rate space."""

    year: int
    interest_rate: float
    income: float
    investment: float
    money: float
    real_gdp: float
    inflation_rate: float
    unemployment_rate: float
    growth_rate: float
    nominal_rate: float
    real_rate: float


@dataclass
class ISLMCurvePoint:
    """Sampled point on the IS or LM curve."""

    income: float
    interest_rate: float
    curve: str  # "IS" or "LM"
    year: int


@dataclass
class Equilibrium:
    """Intersection of the IS and LM relations for one year."""

    income: float
    interest_rate: float
    year: int
    real_gdp: float
    inflation_rate: float
    unemployment_rate: float
    is_historical_estimate: bool = False


@dataclass
class ISLMCurves:
    """IS and LM curves plus their equilibrium for a selected year."""

    year: int
    is_points: list[ISLMCurvePoint] = field(default_factory=list)
    lm_points: list[ISLMCurvePoint] = field(default_factory=list)
    equilibrium: Equilibrium | None = None


@dataclass
class HDIYearPoint:
    """Human development components and estimate for one year."""

    year: int
    life_expectancy: float | None = None
    literacy_rate: float | None = None
    mean_years_school: float | None = None
    gni_per_capita: float | None = None
    poverty_rate: float | None = None
    gini_index: float | None = None
    health_expenditure: float | None = None
    education_expenditure: float | None = None
    hdi_estimate: float | None = None

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class StatsSnapshot:
    """Last known headline values, used when a period has no data."""

    gdp: float
    inflation: float
    unemployment: float
    money_multiplier: float


@dataclass
class PeriodStats:
    """Headline stats for the selected period."""

    gdp: float
    inflation: float
    unemployment: float
    money_multiplier: float
    label: str
    point_count: int
    is_average: bool
