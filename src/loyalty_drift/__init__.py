"""Loyalty Drift - field-level drift checks for loyalty events."""

__version__ = "0.1.0"
