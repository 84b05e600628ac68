"""Random password and username generator."""

__version__ = "1.0.0"
