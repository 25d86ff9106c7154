"""Batch fetching of indicator families."""

import asyncio
import logging

from macro_dashboard.config import ECONOMIC_INDICATORS, SOCIAL_INDICATORS
from macro_dashboard.data.worldbank_fetcher import WorldBankFetcher
from macro_dashboard.models import RawObservation


logger = logging.getLogger(__name__)

IndicatorBundle = dict[str, list[RawObservation]]


class IndicatorAggregator:
    """Fetches a fixed family of indicators concurrently into one bundle."""

    INDICATORS: dict[str, str] = {}
    FAMILY = "indicator"

    def __init__(self, fetcher: WorldBankFetcher) -> None:
        self.fetcher = fetcher

    async def fetch(
        self,
        years_back: int,
        start_year: int | None = None,
        end_year: int | None = None,
    ) -> IndicatorBundle:
        """
        Fetch every indicator in the family.

        Returns:
            Dict keyed by every configured bundle key. A failed indicator
            shows up as an empty list, never as a missing key.
        """
        period = (
            f"{start_year}-{end_year}" if start_year and end_year else f"last {years_back} years"
        )
        logger.info(f"Fetching {len(self.INDICATORS)} {self.FAMILY} indicators for {period}")

        keys = list(self.INDICATORS)
        results = await asyncio.gather(
            *(
                self.fetcher.fetch(self.INDICATORS[key], years_back, start_year, end_year)
                for key in keys
            )
        )
        bundle = dict(zip(keys, results))

        empty = [key for key, series in bundle.items() if not series]
        if empty:
            logger.warning(f"No {self.FAMILY} data for {len(empty)} indicators: {empty}")

        return bundle


class EconomicDataAggregator(IndicatorAggregator):
    """GDP, prices, labor, money supply and external-sector indicators."""

    INDICATORS = ECONOMIC_INDICATORS
    FAMILY = "economic"


class SocialDataAggregator(IndicatorAggregator):
    """Human development indicators."""

    INDICATORS = SOCIAL_INDICATORS
    FAMILY = "social"
