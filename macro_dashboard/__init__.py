"""Single-country macroeconomic dashboard built on World Bank indicators."""

__version__ = "0.1.0"
