"""Centralized constants for item-passing simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

RELIEF_ROUNDS = 20
"""Default round count for relief-mode runs."""

BOUNDED_ROUNDS = 10_000
"""Default round count for bounded-mode runs."""

RELIEF_DIVISOR = 3
"""Worry values are floor-divided by this after every relief-mode inspection."""

INT_BITS = 64
"""Width of the signed integer range every item value must stay within."""

INT_MIN = -(2 ** (INT_BITS - 1))
"""Smallest representable item value."""

INT_MAX = 2 ** (INT_BITS - 1) - 1
"""Largest representable item value."""

SCORED_AGENT_COUNT = 2
"""Number of busiest agents whose inspection counts are multiplied into the score."""

FLUSH_THRESHOLD = 8_192
"""Flush round-log rows to Parquet once this in-memory row count is reached."""
