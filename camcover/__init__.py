"""Camera envelope coverage check."""

__version__ = "0.1.0"
