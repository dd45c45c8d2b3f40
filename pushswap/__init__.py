"""Input validation, stack swap operations and text helpers for integer stack sorting."""

__version__ = "0.1.0"
__all__ = ["checks", "cli", "printf", "stack", "textutils"]