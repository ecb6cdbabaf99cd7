"""Dining philosophers simulation: argument parsing, clock, table state and threaded simulation."""

__version__ = "1.0.0"
__all__ = ["parsing", "clock", "table", "simulation"]