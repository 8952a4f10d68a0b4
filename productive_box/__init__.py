"""Time-of-day commit statistics for a GitHub profile gist and README."""

__version__ = "0.1.0"
