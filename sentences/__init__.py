"""Local document store with revision history."""

__version__ = "0.1.0"
