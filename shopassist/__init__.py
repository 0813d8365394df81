"""Keyword-driven shopping assistant backed by a public product catalog."""

__version__ = "0.1.0"
