"""Run the fetch -> align -> derive pipeline for one selected period."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date

from macro_dashboard.config import Settings
from macro_dashboard.data.aggregator import EconomicDataAggregator, SocialDataAggregator
from macro_dashboard.data.aligner import align_economic, align_social
from macro_dashboard.data.fallback import (
    FALLBACK_MESSAGE,
    FALLBACK_SNAPSHOT,
    fallback_economic_series,
    fallback_hdi_points,
)
from macro_dashboard.data.worldbank_fetcher import WorldBankFetcher
from macro_dashboard.indicators.macro_model import (
    ISLMViewMode,
    islm_curves,
    islm_trajectory,
    selected_curves,
    synthesize_ad_as,
)
from macro_dashboard.indicators.period_stats import latest_snapshot, summarize
from macro_dashboard.models import (
    AnnualRecord,
    DerivedYearPoint,
    HDIYearPoint,
    ISLMCurves,
    ISLMTrajectoryPoint,
    PeriodStats,
    StatsSnapshot,
    YearWindow,
)


logger = logging.getLogger(__name__)


@dataclass
class EconomicResult:
    """Aligned economic data for one trigger, plus derived views."""

    window: YearWindow
    gdp_records: list[AnnualRecord]
    inflation_records: list[AnnualRecord]
    snapshot: StatsSnapshot
    error: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.error is not None

    def ad_as(self) -> list[DerivedYearPoint]:
        return synthesize_ad_as(self.gdp_records)

    def islm_trajectory(self) -> list[ISLMTrajectoryPoint]:
        return islm_trajectory(self.gdp_records)

    def islm_curves(self, year: int) -> ISLMCurves:
        return islm_curves(self.gdp_records, year)

    def islm_view(
        self, mode: ISLMViewMode, selected_year: int, compare_year: int | None = None
    ) -> list[ISLMCurves]:
        return selected_curves(self.gdp_records, mode, selected_year, compare_year)

    def period_stats(self) -> PeriodStats:
        return summarize(self.gdp_records, self.inflation_records, self.window, self.snapshot)


@dataclass
class SocialResult:
    """HDI points for one trigger."""

    window: YearWindow
    points: list[HDIYearPoint] = field(default_factory=list)
    error: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.error is not None


class MacroCalculator:
    """
    Loads and derives dashboard data.

    Each load is a full recomputation. When loads overlap, only the most
    recently started one updates latest_economic / latest_social.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: WorldBankFetcher | None = None,
        current_year: int | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.current_year = current_year or date.today().year
        self.fetcher = fetcher or WorldBankFetcher(self.settings, current_year=self.current_year)
        self.economic = EconomicDataAggregator(self.fetcher)
        self.social = SocialDataAggregator(self.fetcher)
        self.latest_economic: EconomicResult | None = None
        self.latest_social: SocialResult | None = None
        self._economic_generation = 0
        self._social_generation = 0

    def window(self, years_back: int) -> YearWindow:
        return YearWindow.last_years(years_back, self.current_year)

    async def close(self) -> None:
        await self.fetcher.close()

    async def __aenter__(self) -> "MacroCalculator":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    @staticmethod
    def _bounds(window: YearWindow) -> tuple[int | None, int | None]:
        if window.is_custom:
            return window.start_year, window.end_year
        return None, None

    async def load_economic(self, window: YearWindow) -> EconomicResult:
        """
        Fetch and align economic data for the window.

        A batch that fails outright yields the synthetic fallback dataset with
        `error` set, never an exception.
        """
        self._economic_generation += 1
        generation = self._economic_generation
        start_year, end_year = self._bounds(window)

        try:
            bundle = await self.economic.fetch(window.years_back, start_year, end_year)
            aligned = align_economic(bundle, window)
            result = EconomicResult(
                window=window,
                gdp_records=aligned.gdp_records,
                inflation_records=aligned.inflation_records,
                snapshot=latest_snapshot(aligned.gdp_records, aligned.inflation_records),
            )
        except Exception as e:
            logger.error(f"Data loading error: {e}")
            fallback = fallback_economic_series(window)
            result = EconomicResult(
                window=window,
                gdp_records=fallback.gdp_records,
                inflation_records=fallback.inflation_records,
                snapshot=FALLBACK_SNAPSHOT,
                error=FALLBACK_MESSAGE,
            )

        if generation == self._economic_generation:
            self.latest_economic = result
        else:
            logger.info(f"Discarding stale economic load for {window.start_year}-{window.end_year}")
        return result

    async def load_social(self, window: YearWindow) -> SocialResult:
        """Fetch and align HDI data for the window, with a fallback series on failure."""
        self._social_generation += 1
        generation = self._social_generation
        start_year, end_year = self._bounds(window)

        try:
            bundle = await self.social.fetch(window.years_back, start_year, end_year)
            result = SocialResult(window=window, points=align_social(bundle, window))
        except Exception as e:
            logger.error(f"HDI data loading error: {e}")
            result = SocialResult(window=window, points=fallback_hdi_points(), error=FALLBACK_MESSAGE)

        if generation == self._social_generation:
            self.latest_social = result
        else:
            logger.info(f"Discarding stale HDI load for {window.start_year}-{window.end_year}")
        return result

    async def load_all(
        self, window: YearWindow, hdi_window: YearWindow
    ) -> tuple[EconomicResult, SocialResult]:
        """Run the economic and social pipelines side by side."""
        return await asyncio.gather(self.load_economic(window), self.load_social(hdi_window))


def main() -> None:
    """CLI entry point: load data and print the period summary."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Macro dashboard period summary")
    parser.add_argument("--years", type=int, default=None, help="Last N years")
    parser.add_argument("--start", type=int, help="Custom period start year")
    parser.add_argument("--end", type=int, help="Custom period end year")
    args = parser.parse_args()

    try:
        settings = Settings()
        settings.validate()
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    async def run() -> EconomicResult:
        async with MacroCalculator(settings) as calc:
            if args.start and args.end:
                window = YearWindow.custom(args.start, args.end)
            else:
                window = calc.window(args.years or settings.default_years)
            return await calc.load_economic(window)

    result = asyncio.run(run())
    stats = result.period_stats()

    print(f"\n{settings.country_code} Macroeconomic Summary - {stats.label}")
    print("=" * 60)
    if result.error:
        print(f"WARNING: {result.error}")
    print(f"  GDP:              {stats.gdp:,.0f}B USD")
    print(f"  Inflation:        {stats.inflation:.1f}%")
    print(f"  Unemployment:     {stats.unemployment:.1f}%")
    print(f"  Money multiplier: {stats.money_multiplier:.1f}x")
    print(f"  Data points:      {stats.point_count}")

    print("\n" + "-" * 60)
    print("AD/AS by year:\n")
    for point in result.ad_as():
        print(f"  {point.year} | AD {point.ad:6.1f} | AS {point.as_:6.1f} | P {point.price:9.1f}")


if __name__ == "__main__":
    main()
