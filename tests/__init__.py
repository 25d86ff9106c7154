"""Test suite for the macro dashboard.

This package contains:
- Unit tests for fetching, alignment and each derived estimator
- Integration tests for the full fetch -> align -> derive pipeline
"""
