"""Headline statistics for the selected period."""

import logging

import pandas as pd

from macro_dashboard.models import AnnualRecord, PeriodStats, StatsSnapshot, YearWindow


logger = logging.getLogger(__name__)

# Windows longer than this show averages instead of latest values
AVERAGE_THRESHOLD_YEARS = 5

DEFAULT_GDP_BILLIONS = 630.0
DEFAULT_MONEY_MULTIPLIER = 2.5


def records_to_frame(records: list[AnnualRecord]) -> pd.DataFrame:
    """Year-indexed DataFrame of records, missing fields as NaN."""
    if not records:
        return pd.DataFrame()
    df = pd.DataFrame([r.to_dict() for r in records])
    return df.set_index("year").sort_index()


def _column(df: pd.DataFrame, column: str) -> pd.Series:
    if df.empty or column not in df.columns:
        return pd.Series(dtype=float)
    return df[column].dropna().astype(float)


def _last(values: pd.Series) -> float | None:
    return float(values.iloc[-1]) if not values.empty else None


def latest_snapshot(
    gdp_records: list[AnnualRecord], inflation_records: list[AnnualRecord]
) -> StatsSnapshot:
    """
    Last known headline values across all loaded data.

    GDP comes from the latest GDP record; inflation is the latest non-zero
    value, searching backwards; the money multiplier prefers the latest
    inflation record, then the latest GDP record, then any earlier record.
    """
    latest_gdp = gdp_records[-1] if gdp_records else None
    latest_infl = inflation_records[-1] if inflation_records else None

    gdp = DEFAULT_GDP_BILLIONS
    if latest_gdp is not None and latest_gdp.gdp_billions:
        gdp = latest_gdp.gdp_billions

    inflation = 0.0
    for record in reversed(inflation_records):
        if record.inflation_pct and record.inflation_pct > 0:
            inflation = record.inflation_pct
            break

    unemployment = 0.0
    if latest_infl is not None and latest_infl.unemployment_pct:
        unemployment = latest_infl.unemployment_pct

    money_multiplier = DEFAULT_MONEY_MULTIPLIER
    candidates = [latest_infl, latest_gdp, *reversed(inflation_records), *reversed(gdp_records)]
    for record in candidates:
        if record is not None and record.money_multiplier:
            money_multiplier = record.money_multiplier
            break

    return StatsSnapshot(
        gdp=gdp,
        inflation=inflation,
        unemployment=unemployment,
        money_multiplier=money_multiplier,
    )


def period_label(window: YearWindow, use_average: bool) -> str:
    if window.is_custom:
        if use_average:
            return f"{window.start_year}-{window.end_year} Average"
        return f"Latest ({window.start_year}-{window.end_year})"
    if use_average:
        return f"{window.years_back}-Year Average"
    return f"Latest ({window.start_year}-{window.end_year - 1})"


def summarize(
    gdp_records: list[AnnualRecord],
    inflation_records: list[AnnualRecord],
    window: YearWindow,
    snapshot: StatsSnapshot,
) -> PeriodStats:
    """
    Reduce the period to one value per headline field.

    Windows longer than AVERAGE_THRESHOLD_YEARS report the mean of the
    non-missing values in the window; shorter windows report the
    chronologically last value. Fields with no values use the snapshot.
    """
    gdp_df = records_to_frame([r for r in gdp_records if window.contains(r.year)])
    infl_df = records_to_frame([r for r in inflation_records if window.contains(r.year)])

    if gdp_df.empty and infl_df.empty:
        return PeriodStats(
            gdp=snapshot.gdp,
            inflation=snapshot.inflation,
            unemployment=snapshot.unemployment,
            money_multiplier=snapshot.money_multiplier,
            label="Latest Available",
            point_count=0,
            is_average=False,
        )

    use_average = window.span > AVERAGE_THRESHOLD_YEARS

    def reduce(values: pd.Series, default: float) -> float:
        if values.empty:
            return default
        return float(values.mean()) if use_average else _last(values)

    multiplier_values = _column(gdp_df, "money_multiplier")
    if multiplier_values.empty:
        multiplier_values = _column(infl_df, "money_multiplier")

    stats = PeriodStats(
        gdp=reduce(_column(gdp_df, "gdp_billions"), snapshot.gdp),
        inflation=reduce(_column(infl_df, "inflation_pct"), snapshot.inflation),
        unemployment=reduce(_column(infl_df, "unemployment_pct"), snapshot.unemployment),
        money_multiplier=reduce(multiplier_values, snapshot.money_multiplier),
        label=period_label(window, use_average),
        point_count=len(gdp_df) + len(infl_df),
        is_average=use_average,
    )
    logger.debug(f"Period stats {stats.label}: {stats}")
    return stats
