"""Translation key consistency checker."""

__version__ = "1.0.0"
