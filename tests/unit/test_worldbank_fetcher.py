"""Unit tests for the World Bank fetcher.

Tests cover:
- Request URL and query parameters
- Observation parsing, including null values
- Timeouts, HTTP errors and malformed payloads degrading to empty series
- Client lifecycle
"""

import asyncio

import httpx
import pytest

from macro_dashboard.config import Settings
from macro_dashboard.data.worldbank_fetcher import WorldBankFetcher
from macro_dashboard.models import RawObservation


def run_fetch(fetcher: WorldBankFetcher, code: str = "NY.GDP.MKTP.CD", years_back: int = 15, **kwargs):
    async def go():
        try:
            return await fetcher.fetch(code, years_back, **kwargs)
        finally:
            await fetcher.close()

    return asyncio.run(go())


# ============================================================================
# Request Tests
# ============================================================================

@pytest.mark.unit
class TestRequest:
    """Test request construction."""

    def test_url_and_params(self, make_fetcher, make_payload):
        """Test the request hits the country/indicator path with date range params."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=make_payload({2023: 1.0}))

        run_fetch(make_fetcher(handler))

        request = seen[0]
        assert request.url.path == "/v2/country/ARG/indicator/NY.GDP.MKTP.CD"
        assert request.url.params["date"] == "2009:2024"
        assert request.url.params["format"] == "json"
        assert request.url.params["per_page"] == "200"

    def test_custom_period_overrides_years_back(self, make_fetcher, make_payload):
        """Test explicit start/end years take precedence over years_back."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.params["date"])
            return httpx.Response(200, json=make_payload({}))

        run_fetch(make_fetcher(handler), start_year=1995, end_year=2005)

        assert seen == ["1995:2005"]

    def test_request_window(self, settings):
        """Test window resolution against the injected current year."""
        fetcher = WorldBankFetcher(settings, current_year=2024)

        assert fetcher.request_window(5) == (2019, 2024)
        assert fetcher.request_window(5, 2000, 2010) == (2000, 2010)

    def test_invalid_settings_rejected(self):
        """Test the fetcher validates its settings on construction."""
        with pytest.raises(ValueError, match="ISO3"):
            WorldBankFetcher(Settings(country_code="AR"))


# ============================================================================
# Parsing Tests
# ============================================================================

@pytest.mark.unit
class TestParsing:
    """Test observation parsing."""

    def test_success(self, make_fetcher, make_payload):
        """Test a well-formed response yields one observation per row."""
        payload = make_payload({2022: 631.1e9, 2023: 640.6e9})
        fetcher = make_fetcher(lambda request: httpx.Response(200, json=payload))

        result = run_fetch(fetcher)

        assert sorted(result, key=lambda o: o.year) == [
            RawObservation(year=2022, value=631.1e9),
            RawObservation(year=2023, value=640.6e9),
        ]

    def test_null_values_kept_as_absent(self, make_fetcher, make_payload):
        """Test null values survive parsing as None rather than being dropped."""
        payload = make_payload({2023: None, 2022: 5.0})
        fetcher = make_fetcher(lambda request: httpx.Response(200, json=payload))

        result = {o.year: o.value for o in run_fetch(fetcher)}

        assert result == {2022: 5.0, 2023: None}

    def test_null_observation_list(self, make_fetcher):
        """Test a `[metadata, null]` envelope means no data."""
        fetcher = make_fetcher(lambda request: httpx.Response(200, json=[{"page": 0}, None]))

        assert run_fetch(fetcher) == []

    @pytest.mark.parametrize(
        "payload",
        [
            [{"message": [{"id": "120", "value": "Invalid value"}]}],
            {"error": "bad"},
            [{}, {"not": "a list"}],
            [],
        ],
    )
    def test_malformed_payload(self, make_fetcher, payload):
        """Test unexpected shapes degrade to an empty series."""
        fetcher = make_fetcher(lambda request: httpx.Response(200, json=payload))

        assert run_fetch(fetcher) == []

    def test_unparseable_rows_skipped(self, make_fetcher):
        """Test rows with a bad date are skipped without losing the rest."""
        payload = [{}, [{"date": "n/a", "value": 1.0}, "junk", {"date": "2020", "value": 2.0}]]
        fetcher = make_fetcher(lambda request: httpx.Response(200, json=payload))

        assert run_fetch(fetcher) == [RawObservation(year=2020, value=2.0)]

    def test_non_numeric_value(self, make_fetcher):
        """Test a non-numeric value degrades the whole series to empty."""
        payload = [{}, [{"date": "2020", "value": "abc"}]]
        fetcher = make_fetcher(lambda request: httpx.Response(200, json=payload))

        assert run_fetch(fetcher) == []

    def test_invalid_json(self, make_fetcher):
        """Test a non-JSON body degrades to an empty series."""
        fetcher = make_fetcher(lambda request: httpx.Response(200, content=b"<html>down</html>"))

        assert run_fetch(fetcher) == []


# ============================================================================
# Failure Tests
# ============================================================================

@pytest.mark.unit
class TestFailures:
    """Test transport failures never raise."""

    @pytest.mark.parametrize("status", [404, 500, 502, 503])
    def test_http_error_status(self, make_fetcher, status):
        """Test HTTP error statuses yield an empty series."""
        fetcher = make_fetcher(lambda request: httpx.Response(status))

        assert run_fetch(fetcher) == []

    def test_transport_timeout(self, make_fetcher):
        """Test an httpx timeout yields an empty series."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        assert run_fetch(make_fetcher(handler)) == []

    def test_connect_error(self, make_fetcher):
        """Test a connection failure yields an empty series."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        assert run_fetch(make_fetcher(handler)) == []

    def test_slow_response_hits_timeout(self, make_fetcher, make_payload, settings):
        """Test the per-fetch timeout cuts off a response that never arrives in time."""
        settings.request_timeout = 0.05

        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json=make_payload({2023: 1.0}))

        assert run_fetch(make_fetcher(handler, settings)) == []

    def test_timeout_is_logged(self, make_fetcher, caplog):
        """Test failures leave a warning in the log."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with caplog.at_level("WARNING"):
            run_fetch(make_fetcher(handler), code="SL.UEM.TOTL.ZS")

        assert "Timeout fetching World Bank SL.UEM.TOTL.ZS" in caplog.text


# ============================================================================
# Lifecycle Tests
# ============================================================================

@pytest.mark.unit
class TestLifecycle:
    """Test client creation and cleanup."""

    def test_lazy_client(self, settings):
        """Test the client is only created on first access and dropped on close."""

        async def go():
            fetcher = WorldBankFetcher(settings)
            assert fetcher._client is None
            client = fetcher.client
            assert fetcher.client is client
            await fetcher.close()
            assert fetcher._client is None

        asyncio.run(go())
