"""Dining philosophers simulation with threaded philosophers and a monitor."""

__version__ = "1.0.0"
__all__ = ["cli", "output", "parsing", "simulation", "timing"]