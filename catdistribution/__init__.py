"""Cat Distribution System: a browsable, filterable catalog of cats."""

__version__ = "1.0.0"
