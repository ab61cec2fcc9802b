"""A small printf-style formatter for a limited set of conversions."""

__version__ = "1.0.0"
__all__ = ["printf", "writers"]