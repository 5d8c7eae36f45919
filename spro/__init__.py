"""Command-line timer that logs study sessions to one file per day."""

__version__ = "0.1.0"
__all__ = ["__version__"]