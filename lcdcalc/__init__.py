"""Expression engine for a small scientific calculator with a 16-character display."""

__version__ = "0.1.0"
__all__ = ["parser", "utils"]