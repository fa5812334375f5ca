"""Spend Insights: behavior spending predictions and recommendations."""

__version__ = "0.1.0"
