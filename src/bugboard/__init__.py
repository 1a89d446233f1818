"""Log bugs and report on them from a remote bug store."""

__version__ = "0.1.0"
