"""Diagnostics package.

Light-weight runnable checks (`python -m calgreg.diagnostics.<tool>`).
"""

__all__ = ["pretty_month", "round_trip"]
