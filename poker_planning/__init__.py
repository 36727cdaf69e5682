"""Online poker tournament schedule aggregation for French platforms."""

__version__ = "0.1.0"
