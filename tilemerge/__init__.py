"""A sliding-tile number merging puzzle with a pygame window and a best score kept in SQLite."""

__version__ = "0.1.0"
__all__ = ["__version__"]