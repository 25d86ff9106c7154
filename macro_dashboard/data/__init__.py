"""Data fetching and alignment."""

from .worldbank_fetcher import WorldBankFetcher
from .aggregator import EconomicDataAggregator, SocialDataAggregator
from .aligner import align_economic, align_social

__all__ = [
    "WorldBankFetcher",
    "EconomicDataAggregator",
    "SocialDataAggregator",
    "align_economic",
    "align_social",
]
