"""Unit tests for the simplified HDI estimate."""

import math

import pytest

from macro_dashboard.indicators.hdi import (
    attach_hdi_estimates,
    education_index,
    estimate_hdi,
    income_index,
    life_index,
)
from macro_dashboard.models import HDIYearPoint


@pytest.mark.unit
class TestSubIndices:

    def test_life_index_bounds(self):
        assert life_index(20) == 0.0
        assert life_index(85) == 1.0
        assert life_index(90) == 1.0
        assert life_index(52.5) == pytest.approx(0.5)

    def test_education_default(self):
        assert education_index(None) == 0.6
        assert education_index(7.5) == pytest.approx(0.5)
        assert education_index(20) == 1.0

    def test_income_index(self):
        assert income_index(100) == 0.0
        assert income_index(75_000) == pytest.approx(1.0)
        assert income_index(0) == 0.0
        assert income_index(-5) == 0.0


@pytest.mark.unit
class TestEstimate:

    def test_geometric_mean(self):
        expected = (life_index(76.5) * 0.6 * income_index(20000)) ** (1 / 3)
        assert estimate_hdi(76.5, None, 20000) == pytest.approx(expected)

    def test_maximum(self):
        assert estimate_hdi(85, 15, 75_000) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "life,school,gni",
        [(10, 0, 50), (30, 3, 500), (76.5, 11, 22000), (100, 25, 200_000)],
    )
    def test_in_unit_interval(self, life, school, gni):
        assert 0.0 <= estimate_hdi(life, school, gni) <= 1.0

    def test_monotonic_in_each_input(self):
        base = estimate_hdi(70, 10, 15000)
        assert estimate_hdi(75, 10, 15000) >= base
        assert estimate_hdi(70, 12, 15000) >= base
        assert estimate_hdi(70, 10, 25000) >= base

    def test_finite(self):
        assert math.isfinite(estimate_hdi(76.5, None, 1))


@pytest.mark.unit
class TestAttach:

    def test_requires_life_expectancy_and_gni(self):
        points = [
            HDIYearPoint(year=2020, life_expectancy=75.9, gni_per_capita=20000),
            HDIYearPoint(year=2021, life_expectancy=75.4),
            HDIYearPoint(year=2022, gni_per_capita=22000),
        ]

        attach_hdi_estimates(points)

        assert points[0].hdi_estimate is not None
        assert points[1].hdi_estimate is None
        assert points[2].hdi_estimate is None
