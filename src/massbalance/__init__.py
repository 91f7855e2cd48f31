"""MassBalance - weight and balance calculations for small aircraft."""

__version__ = "0.1.0"
