"""Simplified Human Development Index estimate."""

import math

from macro_dashboard.models import HDIYearPoint


LIFE_EXPECTANCY_MIN = 20
LIFE_EXPECTANCY_MAX = 85
SCHOOLING_MAX_YEARS = 15
DEFAULT_EDUCATION_INDEX = 0.6
GNI_MIN = 100
GNI_MAX = 75_000


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def life_index(life_expectancy: float) -> float:
    return _clamp01(
        (life_expectancy - LIFE_EXPECTANCY_MIN) / (LIFE_EXPECTANCY_MAX - LIFE_EXPECTANCY_MIN)
    )


def education_index(mean_years_school: float | None) -> float:
    if mean_years_school is None:
        return DEFAULT_EDUCATION_INDEX
    return _clamp01(mean_years_school / SCHOOLING_MAX_YEARS)


def income_index(gni_per_capita: float) -> float:
    if gni_per_capita <= 0:
        return 0.0
    return _clamp01(
        (math.log(gni_per_capita) - math.log(GNI_MIN)) / (math.log(GNI_MAX) - math.log(GNI_MIN))
    )


def estimate_hdi(
    life_expectancy: float, mean_years_school: float | None, gni_per_capita: float
) -> float:
    """Geometric mean of the life, education and income sub-indices, in [0, 1]."""
    product = (
        life_index(life_expectancy)
        * education_index(mean_years_school)
        * income_index(gni_per_capita)
    )
    return product ** (1 / 3)


def attach_hdi_estimates(points: list[HDIYearPoint]) -> list[HDIYearPoint]:
    """Fill hdi_estimate where life expectancy and GNI are both present."""
    for point in points:
        if point.life_expectancy is not None and point.gni_per_capita is not None:
            point.hdi_estimate = estimate_hdi(
                point.life_expectancy, point.mean_years_school, point.gni_per_capita
            )
    return points
