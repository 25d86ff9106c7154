"""Application configuration."""

from .settings import (
    ECONOMIC_INDICATORS,
    INDICATOR_TITLES,
    SOCIAL_INDICATORS,
    YEAR_RANGE_OPTIONS,
    Settings,
)

__all__ = [
    "ECONOMIC_INDICATORS",
    "INDICATOR_TITLES",
    "SOCIAL_INDICATORS",
    "YEAR_RANGE_OPTIONS",
    "Settings",
]
