"""Text, display and Git-related helper utilities for command-line Git tools."""

__version__ = "1.0.0"
__all__ = ["gitinfo", "text"]