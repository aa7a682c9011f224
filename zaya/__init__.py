"""Client for the Zaya link shortener API."""

__version__ = "0.1.0"

__all__ = ["client", "models", "transport"]