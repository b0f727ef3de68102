"""Fulfillment savings calculator: merchant in-house costs vs. Roots."""

__version__ = "1.0.0"
