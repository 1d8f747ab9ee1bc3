"""Desktop emoji picker: browse, search, copy and paste emojis."""

__version__ = "0.1.0"

__all__ = ["__version__"]