"""Event-driven simulation of elastic particle collisions in the unit box."""

__version__ = "1.0.0"