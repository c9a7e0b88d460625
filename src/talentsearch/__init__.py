"""Resume search, filtering and export for the recruitment portal."""

__version__ = "0.1.0"

__all__ = ["__version__"]
