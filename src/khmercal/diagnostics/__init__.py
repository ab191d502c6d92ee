"""Diagnostics package.

- year_table, pretty_month, round_trip: light-weight text output
- leap_years: plot, requires the ``diagnostics`` extras (numpy, matplotlib)
"""

__all__ = ["year_table", "pretty_month", "round_trip", "leap_years"]
