"""Unit tests for configuration and year windows.

Tests cover:
- Environment variable defaults and overrides
- Settings validation
- Indicator tables
- YearWindow construction
"""

import pytest

from macro_dashboard.config import (
    ECONOMIC_INDICATORS,
    INDICATOR_TITLES,
    SOCIAL_INDICATORS,
    YEAR_RANGE_OPTIONS,
    Settings,
)
from macro_dashboard.models import YearWindow


ENV_VARS = (
    "WB_COUNTRY_CODE",
    "WB_BASE_URL",
    "WB_REQUEST_TIMEOUT",
    "WB_PER_PAGE",
    "DEFAULT_YEARS",
    "DEFAULT_HDI_YEARS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# Environment Variable Tests
# ============================================================================

@pytest.mark.unit
class TestEnvironmentVariables:

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.country_code == "ARG"
        assert settings.base_url == "https://api.worldbank.org/v2"
        assert settings.request_timeout == 10.0
        assert settings.per_page == 200
        assert settings.default_years == 15
        assert settings.default_hdi_years == 40

    def test_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("WB_COUNTRY_CODE", "bra")
        monkeypatch.setenv("WB_BASE_URL", "http://localhost:8080/v2/")
        monkeypatch.setenv("WB_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("DEFAULT_YEARS", "30")

        settings = Settings()

        assert settings.country_code == "BRA"
        assert settings.base_url == "http://localhost:8080/v2"
        assert settings.request_timeout == 2.5
        assert settings.default_years == 30


# ============================================================================
# Validation Tests
# ============================================================================

@pytest.mark.unit
class TestValidation:

    def test_valid(self, settings):
        settings.validate()

    @pytest.mark.parametrize("code", ["AR", "ARGE", "A1G", ""])
    def test_bad_country_code(self, code):
        with pytest.raises(ValueError, match="WB_COUNTRY_CODE"):
            Settings(country_code=code).validate()

    def test_bad_timeout(self):
        with pytest.raises(ValueError, match="WB_REQUEST_TIMEOUT"):
            Settings(country_code="ARG", request_timeout=0).validate()

    def test_bad_page_size(self):
        with pytest.raises(ValueError, match="WB_PER_PAGE"):
            Settings(country_code="ARG", per_page=-1).validate()


# ============================================================================
# Indicator Table Tests
# ============================================================================

@pytest.mark.unit
class TestIndicatorTables:

    def test_every_code_has_title(self):
        for code in list(ECONOMIC_INDICATORS.values()) + list(SOCIAL_INDICATORS.values()):
            assert code in INDICATOR_TITLES

    def test_required_keys(self):
        for key in ("gdp", "growth", "gdp_per_capita", "inflation", "inflation_alt", "unemployment"):
            assert key in ECONOMIC_INDICATORS
        for key in ("life_expectancy", "schooling", "gni"):
            assert key in SOCIAL_INDICATORS

    def test_year_range_options(self):
        assert YEAR_RANGE_OPTIONS == (1, 2, 3, 4, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50)


# ============================================================================
# Year Window Tests
# ============================================================================

@pytest.mark.unit
class TestYearWindow:

    def test_last_years(self):
        window = YearWindow.last_years(15, current_year=2024)

        assert (window.start_year, window.end_year) == (2009, 2024)
        assert window.span == 15
        assert not window.is_custom

    def test_custom_orders_years(self):
        window = YearWindow.custom(2020, 2010)

        assert (window.start_year, window.end_year) == (2010, 2020)
        assert window.span == 11
        assert window.is_custom

    def test_contains_is_inclusive(self):
        window = YearWindow.custom(2010, 2020)

        assert window.contains(2010)
        assert window.contains(2020)
        assert not window.contains(2021)
