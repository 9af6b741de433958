"""Timing bounds and file naming for DK-BASIC mappings."""

from __future__ import annotations

MAPPINGS_FILENAME = "mappings.toml"

# Milliseconds. Delays between beats share the debounce bounds.
MIN_DEBOUNCE_TIME = 10
MAX_DEBOUNCE_TIME = 500

MIN_COMBO_WINDOW = 100
MAX_COMBO_WINDOW = 5000
