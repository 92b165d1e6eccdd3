"""Zurich Perspectives - Economy, Equity, and Influence."""

__version__ = "0.1.0"
