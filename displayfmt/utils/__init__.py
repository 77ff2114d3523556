"""
Utility functions for displayfmt.

This package contains:
- locale_utils: Babel locale lookup
- numeric_utils: numeric input parsing
- number_engine: locale-aware number rendering (grouped and compact)
"""
