"""World Bank indicators API fetcher."""

import asyncio
import logging
from datetime import date

import httpx

from macro_dashboard.config import Settings, ECONOMIC_INDICATORS, SOCIAL_INDICATORS, INDICATOR_TITLES
from macro_dashboard.models import RawObservation


logger = logging.getLogger(__name__)


class WorldBankFetcher:
    """Fetches annual indicator series for one country from the World Bank API.

    Never raises on network or payload problems: every failure is logged and
    degrades to an empty series so sibling fetches in a batch are unaffected.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        current_year: int | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self.current_year = current_year or date.today().year
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "WorldBankFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def indicator_url(self, indicator_code: str) -> str:
        return (
            f"{self.settings.base_url}/country/{self.settings.country_code}"
            f"/indicator/{indicator_code}"
        )

    def request_window(
        self, years_back: int, start_year: int | None = None, end_year: int | None = None
    ) -> tuple[int, int]:
        """Resolve the [start, end] year range for a request."""
        start = start_year or (self.current_year - years_back)
        end = end_year or self.current_year
        return start, end

    async def _fetch_payload(self, indicator_code: str, start: int, end: int):
        response = await self.client.get(
            self.indicator_url(indicator_code),
            params={
                "date": f"{start}:{end}",
                "format": "json",
                "per_page": self.settings.per_page,
            },
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _parse_observations(indicator_code: str, payload) -> list[RawObservation]:
        """
        Convert a `[metadata, observations]` envelope into observations.

        Anything that is not a two-element list is treated as no data.
        """
        if not isinstance(payload, list) or len(payload) != 2:
            logger.warning(f"Unexpected API response format for {indicator_code}")
            return []

        rows = payload[1] or []
        if not isinstance(rows, list):
            logger.warning(f"Unexpected observations payload for {indicator_code}")
            return []

        observations = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            try:
                year = int(str(row.get("date", ""))[:4])
            except ValueError:
                continue
            value = row.get("value")
            observations.append(
                RawObservation(year=year, value=float(value) if value is not None else None)
            )
        return observations

    async def fetch(
        self,
        indicator_code: str,
        years_back: int,
        start_year: int | None = None,
        end_year: int | None = None,
    ) -> list[RawObservation]:
        """
        Fetch one indicator's annual series.

        Args:
            indicator_code: World Bank indicator code
            years_back: Window size ending at the current year
            start_year: Explicit start year (custom period)
            end_year: Explicit end year (custom period)

        Returns:
            Observations in API order, empty on any failure
        """
        start, end = self.request_window(years_back, start_year, end_year)
        logger.debug(f"Fetching {indicator_code} for {start}:{end}")

        try:
            payload = await asyncio.wait_for(
                self._fetch_payload(indicator_code, start, end),
                timeout=self.settings.request_timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"Timeout fetching World Bank {indicator_code}")
            return []
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"HTTP error fetching World Bank {indicator_code}: {e.response.status_code}"
            )
            return []
        except httpx.HTTPError as e:
            logger.warning(f"Error fetching World Bank {indicator_code}: {e}")
            return []
        except ValueError as e:
            logger.warning(f"Invalid JSON for World Bank {indicator_code}: {e}")
            return []

        try:
            observations = self._parse_observations(indicator_code, payload)
        except (TypeError, ValueError) as e:
            logger.warning(f"Malformed observations for {indicator_code}: {e}")
            return []

        logger.debug(f"  {indicator_code}: {len(observations)} observations")
        return observations


def main() -> None:
    """CLI entry point for fetching a raw indicator series."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch World Bank indicator data")
    parser.add_argument(
        "--indicator",
        type=str,
        help="Indicator code (e.g. NY.GDP.MKTP.CD)",
    )
    parser.add_argument(
        "--years",
        type=int,
        default=15,
        help="Number of years back from the current year",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List configured indicators and exit",
    )
    args = parser.parse_args()

    if args.list:
        print("\nEconomic indicators:")
        for key, code in ECONOMIC_INDICATORS.items():
            print(f"  {key:22} | {code:22} | {INDICATOR_TITLES.get(code, '')}")
        print("\nSocial indicators:")
        for key, code in SOCIAL_INDICATORS.items():
            print(f"  {key:22} | {code:22} | {INDICATOR_TITLES.get(code, '')}")
        return

    if not args.indicator:
        parser.error("--indicator is required unless --list is given")

    async def run() -> list[RawObservation]:
        async with WorldBankFetcher() as fetcher:
            return await fetcher.fetch(args.indicator, args.years)

    try:
        observations = asyncio.run(run())
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    if not observations:
        print(f"No data for {args.indicator}")
        return

    print(f"\n{args.indicator} - {INDICATOR_TITLES.get(args.indicator, '')}")
    print("-" * 40)
    for obs in sorted(observations, key=lambda o: o.year):
        value = "N/A" if obs.value is None else f"{obs.value:,.2f}"
        print(f"  {obs.year}: {value}")


if __name__ == "__main__":
    main()
