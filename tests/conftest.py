"""Pytest configuration and shared fixtures for the macro dashboard tests.

This module provides fixtures for:
- Settings with test-friendly timeouts
- WorldBankFetcher instances backed by httpx.MockTransport
- World Bank payload and observation builders
- A small economic bundle covering three recent years
"""

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from macro_dashboard.config import ECONOMIC_INDICATORS, Settings
from macro_dashboard.data.worldbank_fetcher import WorldBankFetcher
from macro_dashboard.models import AnnualRecord, RawObservation


CURRENT_YEAR = 2024


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def settings() -> Settings:
    """Provide settings that do not depend on the process environment."""
    return Settings(
        country_code="ARG",
        base_url="https://api.example.test/v2",
        request_timeout=2.0,
        per_page=200,
        default_years=15,
        default_hdi_years=40,
    )


# ============================================================================
# Payload Builders
# ============================================================================

def wb_payload(values: Dict[int, Optional[float]]) -> list:
    """Build a World Bank `[metadata, observations]` envelope, newest year first."""
    rows = [
        {"date": str(year), "value": value}
        for year, value in sorted(values.items(), reverse=True)
    ]
    return [{"page": 1, "pages": 1, "per_page": 200, "total": len(rows)}, rows]


def observations(values: Dict[int, Optional[float]]) -> List[RawObservation]:
    """Build raw observations from a year -> value mapping."""
    return [RawObservation(year=year, value=value) for year, value in sorted(values.items())]


@pytest.fixture
def make_payload() -> Callable[[Dict[int, Optional[float]]], list]:
    return wb_payload


@pytest.fixture
def make_observations() -> Callable[[Dict[int, Optional[float]]], List[RawObservation]]:
    return observations


# ============================================================================
# Fetcher Fixtures
# ============================================================================

@pytest.fixture
def make_fetcher(settings: Settings):
    """Factory for fetchers whose HTTP traffic is served by `handler`.

    The handler receives an httpx.Request and returns an httpx.Response; it
    may be a coroutine function to simulate slow responses.
    """

    def factory(handler, fetcher_settings: Optional[Settings] = None) -> WorldBankFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return WorldBankFetcher(
            fetcher_settings or settings, client=client, current_year=CURRENT_YEAR
        )

    return factory


@pytest.fixture
def indicator_handler():
    """Handler factory serving payloads keyed by indicator code.

    Unknown codes get an empty-but-well-formed envelope, the way the World
    Bank API answers for indicators it has no data for.
    """

    def factory(payloads: Dict[str, list]):
        def handler(request: httpx.Request) -> httpx.Response:
            code = request.url.path.rsplit("/", 1)[-1]
            return httpx.Response(200, json=payloads.get(code, [{"page": 0}, None]))

        return handler

    return factory


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def economic_bundle() -> Dict[str, List[RawObservation]]:
    """Economic bundle for 2021-2023 with every family key present."""
    bundle = {key: [] for key in ECONOMIC_INDICATORS}
    bundle.update(
        gdp=observations({2021: 487.9e9, 2022: 631.1e9, 2023: 640.6e9}),
        growth=observations({2021: 10.72, 2022: 4.96, 2023: -1.61}),
        gdp_per_capita=observations({2021: 10636.1, 2022: 13686.2, 2023: 13730.5}),
        inflation=observations({2021: 53.84, 2022: 69.89}),
        inflation_alt=observations({2022: 72.4, 2023: 133.5}),
        unemployment=observations({2021: 8.74, 2022: 6.81, 2023: 6.14}),
        money_supply=observations({2021: 20.0, 2022: 18.0}),
        domestic_credit=observations({2022: 25.0}),
        bank_deposits=observations({2023: 30.0}),
        foreign_reserves=observations({2023: 23.1e9}),
    )
    return bundle


@pytest.fixture
def three_year_records() -> List[AnnualRecord]:
    """GDP-bearing records for the three-year AD/AS scenario."""
    return [
        AnnualRecord(year=2021, gdp_billions=400.0, growth_pct=10.7),
        AnnualRecord(year=2022, gdp_billions=480.0, inflation_pct=69.9),
        AnnualRecord(year=2023, gdp_billions=630.0, inflation_pct=135.4, unemployment_pct=6.2),
    ]
