"""Synthetic datasets used when a whole fetch batch fails."""

from macro_dashboard.models import (
    AlignedSeries,
    AnnualRecord,
    HDIYearPoint,
    StatsSnapshot,
    YearWindow,
)


FALLBACK_MESSAGE = "API failed. Using recent Argentina data for demonstration."

FALLBACK_FIRST_YEAR = 2020
FALLBACK_LAST_YEAR = 2023

# year: (gdp billions, growth %, gdp per capita, inflation %, unemployment %)
FALLBACK_ECONOMY: dict[int, tuple[float, float, int, float, float]] = {
    2020: (385.7, -9.9, 8500, 40.1, 11.5),
    2021: (487.9, 10.7, 10600, 53.8, 8.8),
    2022: (631.1, 5.0, 13700, 69.9, 6.8),
    2023: (630.0, -1.6, 13700, 135.4, 6.2),
}

FALLBACK_SNAPSHOT = StatsSnapshot(gdp=630.0, inflation=135.4, unemployment=6.2, money_multiplier=1.8)

# Demo HDI: 2019 base plus a fixed annual step
FALLBACK_HDI_BASE = 0.825
FALLBACK_HDI_STEP = 0.002


def fallback_economic_series(window: YearWindow) -> AlignedSeries:
    """Recent-years dataset, clipped to the selected window."""
    first = max(window.start_year, FALLBACK_FIRST_YEAR)
    last = min(window.end_year, FALLBACK_LAST_YEAR)
    records = []
    for year in range(first, last + 1):
        gdp, growth, per_capita, inflation, unemployment = FALLBACK_ECONOMY[year]
        records.append(
            AnnualRecord(
                year=year,
                gdp_billions=gdp,
                growth_pct=growth,
                gdp_per_capita=per_capita,
                inflation_pct=inflation,
                unemployment_pct=unemployment,
            )
        )
    # Every synthetic year carries both GDP and inflation fields
    return AlignedSeries(records=records, gdp_records=list(records), inflation_records=list(records))


def fallback_hdi_points() -> list[HDIYearPoint]:
    points = []
    for year in range(2019, 2024):
        offset = year - 2019
        life_expectancy = 76.5 + offset * 0.1
        gni = 20000 + offset * 500
        points.append(
            HDIYearPoint(
                year=year,
                life_expectancy=life_expectancy,
                gni_per_capita=gni,
                poverty_rate=35.5 - offset * 0.5,
                hdi_estimate=FALLBACK_HDI_BASE + offset * FALLBACK_HDI_STEP,
            )
        )
    return points
